import logging
from accounts.core.exceptions import ConflictError, NotFoundError, ValidationError
from accounts.core.security import PasswordCodec, password_codec
from accounts.models.user import User
from accounts.schemas.user import UserPassword, UserRegistration, UserResponse, UserUpdate
from accounts.services.validation import (
    ensure_valid,
    validate_password_change,
    validate_registration,
    validate_update,
)
from accounts.storage.pagination import Page, PageRequest
from accounts.storage.user_store import EMAIL_ALREADY_EXISTS_MESSAGE, UserStore

logger = logging.getLogger(__name__)

USER_NOT_FOUND_MESSAGE = "User not found"
PASSWORDS_DO_NOT_MATCH_MESSAGE = "Passwords do not match"
SAME_PASSWORD_MESSAGE = "Your password must be different from your current password"
PASSWORD_CHANGED_MESSAGE = "Your password was changed successfully"


class UserService:
    """
    User lifecycle operations.

    Every operation validates its input before touching the store, and
    checks that the user exists before applying any business rule.
    """

    def __init__(self, store: UserStore, codec: PasswordCodec = password_codec):
        self.store = store
        self.codec = codec

    def create_user(self, payload: UserRegistration) -> UserResponse:
        """Register a new user; the email must not be taken"""
        ensure_valid(validate_registration(payload))
        # The unique index on users.email covers requests racing past this check
        if self.store.exists_by_email(payload.email):
            raise ConflictError(EMAIL_ALREADY_EXISTS_MESSAGE)

        logger.info(f"Creating user: {payload.email}")
        user = User(
            name=payload.name,
            email=payload.email,
            password=self.codec.hash(payload.password),
        )
        return self._to_response(self.store.save(user))

    def get_users(self, page_request: PageRequest) -> Page[UserResponse]:
        return self.store.find_all(page_request).map(self._to_response)

    def get_user_by_id(self, user_id: int) -> UserResponse:
        logger.info(f"Get user by id: {user_id}")
        return self._to_response(self._get_existing(user_id))

    def update_user(self, user_id: int, payload: UserUpdate) -> UserResponse:
        """
        Apply name and email when present and different from the stored value.

        The row is saved even when nothing changed.
        """
        ensure_valid(validate_update(payload))
        logger.info(f"Modify user by id: {user_id}")
        user = self._get_existing(user_id)

        if payload.email is not None and payload.email != user.email:
            user.email = payload.email
        if payload.name is not None and payload.name != user.name:
            user.name = payload.name

        return self._to_response(self.store.save(user))

    def change_password(self, user_id: int, payload: UserPassword) -> str:
        ensure_valid(validate_password_change(payload))
        user = self._get_existing(user_id)

        if payload.password != payload.confirm_password:
            raise ValidationError(PASSWORDS_DO_NOT_MATCH_MESSAGE)
        if self.codec.verify(user.password, payload.password):
            raise ConflictError(SAME_PASSWORD_MESSAGE)

        logger.info(f"Changing password for user id: {user_id}")
        user.password = self.codec.hash(payload.confirm_password)
        self.store.save(user)
        return PASSWORD_CHANGED_MESSAGE

    def delete_user(self, user_id: int) -> str:
        self._get_existing(user_id)
        logger.info(f"Delete user by id: {user_id}")
        self.store.delete_by_id(user_id)
        return f"User with Id {user_id} was deleted successfully"

    def _get_existing(self, user_id: int) -> User:
        user = self.store.find_by_id(user_id)
        if user is None:
            raise NotFoundError(USER_NOT_FOUND_MESSAGE)
        return user

    @staticmethod
    def _to_response(user: User) -> UserResponse:
        return UserResponse.model_validate(user)
