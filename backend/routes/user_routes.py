import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import Response
from pydantic import BaseModel
from sqlalchemy.orm import Session

from backend.auth.dependencies import get_current_user
from backend.auth.passwords import hash_password
from backend.core.errors import ConflictFailure, ValidationFailure
from backend.core.validation import USER_RULES, collect_errors
from backend.database import get_db
from backend.models.user import User
from backend.stores import user_store

router = APIRouter(tags=['users'])

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL_MESSAGE = 'Sorry, that email address is already in use'


class CreateUserRequest(BaseModel):
    firstName: str | None = None
    lastName: str | None = None
    emailAddress: str | None = None
    password: str | None = None


class CurrentUserResponse(BaseModel):
    firstName: str
    lastName: str
    emailAddress: str


@router.get('/users', response_model=CurrentUserResponse)
def get_authenticated_user(current_user: User = Depends(get_current_user)):
    return CurrentUserResponse(
        firstName=current_user.first_name,
        lastName=current_user.last_name,
        emailAddress=current_user.email_address,
    )


@router.post('/users', status_code=status.HTTP_201_CREATED)
def create_user(data: CreateUserRequest | None = None, db: Session = Depends(get_db)):
    data = data or CreateUserRequest()

    errors = collect_errors(data.model_dump(), USER_RULES)
    if errors:
        raise ValidationFailure(errors)

    if user_store.find_user_by_email(db, data.emailAddress) is not None:
        raise ConflictFailure(DUPLICATE_EMAIL_MESSAGE)

    user = user_store.create_user(
        db,
        first_name=data.firstName,
        last_name=data.lastName,
        email_address=data.emailAddress,
        password=hash_password(data.password),
    )
    logger.info('Registered user %s', user.id)

    return Response(status_code=status.HTTP_201_CREATED, headers={'Location': '/'})
