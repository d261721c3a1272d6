import logging

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from sqlalchemy.orm import Session

from backend.auth.passwords import verify_password
from backend.core.errors import AuthenticationFailure
from backend.database import get_db
from backend.models.user import User
from backend.stores import user_store

logger = logging.getLogger(__name__)

security = HTTPBasic(auto_error=False)


async def read_basic_credentials(request: Request) -> HTTPBasicCredentials | None:
    try:
        return await security(request)
    except HTTPException:
        # Header present but not decodable as name:secret.
        return None


def get_current_user(
    credentials: HTTPBasicCredentials | None = Depends(read_basic_credentials),
    db: Session = Depends(get_db),
) -> User:
    if credentials is None:
        raise _reject("Auth header not found")

    user = user_store.find_user_by_email(db, credentials.username)
    if user is None:
        raise _reject(f"User not found for username: {credentials.username}")

    if not verify_password(credentials.password, user.password):
        raise _reject(f"Authentication failure for username: {user.email_address}")

    return user


def _reject(reason: str) -> AuthenticationFailure:
    logger.warning(reason)
    return AuthenticationFailure(reason)
