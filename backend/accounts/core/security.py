from passlib.context import CryptContext
from accounts.core.config import settings

# CryptContext handles password hashing using bcrypt
# bcrypt generates a random salt per hash and embeds it with the cost factor
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against a hash using constant-time comparison"""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        # Malformed or unrecognised hash - fail closed
        return False


def get_password_hash(password: str) -> str:
    """Hash a password using bcrypt"""
    return pwd_context.hash(password)


class PasswordCodec:
    """Hashes and verifies passwords; injected into UserService"""

    def hash(self, password: str) -> str:
        return get_password_hash(password)

    def verify(self, hashed_password: str, plain_password: str) -> bool:
        return verify_password(plain_password, hashed_password)


password_codec = PasswordCodec()
