from fastapi import Depends
from sqlalchemy.orm import Session
from accounts.core.database import get_db
from accounts.services.user_service import UserService
from accounts.storage.user_store import UserStore


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    """
    Build a UserService bound to the request's database session.

    Route handlers depend on this instead of the session so the store and
    codec wiring lives in one place.
    """
    return UserService(UserStore(db))
