import logging
from typing import Optional
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from accounts.core.exceptions import ConflictError
from accounts.models.user import User
from accounts.storage.pagination import Page, PageRequest

logger = logging.getLogger(__name__)

EMAIL_ALREADY_EXISTS_MESSAGE = "Email already exist"


class UserStore:
    """Persists and loads User rows through a single SQLAlchemy session"""

    def __init__(self, db: Session):
        self.db = db

    def exists_by_email(self, email: str) -> bool:
        """Exact-match lookup used before registration"""
        stmt = select(User.id).where(User.email == email).limit(1)
        return self.db.execute(stmt).first() is not None

    def save(self, user: User) -> User:
        """
        Insert a new user or flush changes to an existing one.

        The database assigns id and created_at on insert; the row is refreshed
        so callers see them. A duplicate email that slipped past the
        existence check is caught by the unique index here.
        """
        email = user.email
        try:
            self.db.add(user)
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            logger.info(f"Unique constraint rejected email: {email}")
            raise ConflictError(EMAIL_ALREADY_EXISTS_MESSAGE)
        self.db.refresh(user)
        return user

    def find_by_id(self, user_id: int) -> Optional[User]:
        return self.db.get(User, user_id)

    def find_all(self, page_request: PageRequest) -> Page[User]:
        """Fetch one page of users plus the total row count"""
        total = self.db.execute(select(func.count()).select_from(User)).scalar_one()

        stmt = select(User)
        for order in page_request.sort:
            column = getattr(User, order.attribute)
            stmt = stmt.order_by(column.desc() if order.descending else column.asc())
        stmt = stmt.offset(page_request.offset).limit(page_request.size)

        users = list(self.db.execute(stmt).scalars().all())
        return Page(users, page_request.page, page_request.size, total)

    def delete_by_id(self, user_id: int) -> None:
        """Delete a user; callers check existence first"""
        user = self.db.get(User, user_id)
        self.db.delete(user)
        self.db.commit()
