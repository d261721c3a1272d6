"""Credential store: lookups and inserts for User records."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from backend.core.errors import StoreConstraintFailure
from backend.models.user import User

logger = logging.getLogger(__name__)


def find_user_by_email(db: Session, email_address: str) -> User | None:
    return db.query(User).filter(User.email_address == email_address).first()


def create_user(
    db: Session,
    *,
    first_name: str,
    last_name: str,
    email_address: str,
    password: str,
) -> User:
    """Insert a user. `password` must already be hashed."""
    user = User(
        first_name=first_name,
        last_name=last_name,
        email_address=email_address,
        password=password,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning("User insert rejected by the store: %s", exc.orig)
        raise StoreConstraintFailure(str(exc.orig)) from exc
    db.refresh(user)
    return user
