from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from accounts.core.database import Base


class User(Base):
    """
    User model representing registered accounts.

    Passwords are stored as bcrypt hashes (never plaintext).
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), nullable=False)
    # Email is unique and indexed for the existence check on registration
    email = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)
    # Set once by the database on insert
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
