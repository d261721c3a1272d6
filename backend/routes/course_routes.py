import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import Response
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from backend.auth.dependencies import get_current_user
from backend.core.errors import CourseNotFound, ValidationFailure
from backend.core.validation import COURSE_RULES, collect_errors
from backend.database import get_db
from backend.models.course import Course
from backend.models.user import User
from backend.stores import course_store

router = APIRouter(tags=['courses'])

logger = logging.getLogger(__name__)

# Wire name -> Course attribute.
COURSE_FIELDS = {
    'userId': 'user_id',
    'title': 'title',
    'description': 'description',
    'estimatedTime': 'estimated_time',
    'materialsNeeded': 'materials_needed',
}


class CourseRequest(BaseModel):
    userId: int | None = None
    title: str | None = None
    description: str | None = None
    estimatedTime: str | None = None
    materialsNeeded: str | None = None


class CourseOwnerResponse(BaseModel):
    id: int
    firstName: str
    lastName: str
    emailAddress: str


class CourseResponse(BaseModel):
    id: int
    userId: int
    title: str
    description: str
    estimatedTime: str | None = None
    materialsNeeded: str | None = None


class CourseWithOwnerResponse(CourseResponse):
    owner: CourseOwnerResponse = Field(alias='User')


class CourseListResponse(BaseModel):
    courses: list[CourseWithOwnerResponse]


def to_course_response(course: Course) -> CourseResponse:
    return CourseResponse(
        id=course.id,
        userId=course.user_id,
        title=course.title,
        description=course.description,
        estimatedTime=course.estimated_time,
        materialsNeeded=course.materials_needed,
    )


def to_course_with_owner_response(course: Course) -> CourseWithOwnerResponse:
    owner = course.owner
    return CourseWithOwnerResponse(
        **to_course_response(course).model_dump(),
        User=CourseOwnerResponse(
            id=owner.id,
            firstName=owner.first_name,
            lastName=owner.last_name,
            emailAddress=owner.email_address,
        ),
    )


def validated_course_fields(data: CourseRequest | None) -> dict:
    """Run the course rules and return the provided fields keyed by attribute name."""
    data = data or CourseRequest()
    errors = collect_errors(data.model_dump(), COURSE_RULES)
    if errors:
        raise ValidationFailure(errors)

    provided = data.model_dump(exclude_unset=True)
    return {COURSE_FIELDS[name]: value for name, value in provided.items()}


def get_course_or_404(course_id: int, db: Session) -> Course:
    course = course_store.find_course(db, course_id)
    if course is None:
        raise CourseNotFound(course_id)
    return course


def log_foreign_course_access(action: str, course: Course, current_user: User) -> None:
    # Any authenticated user may manage any course; record when that happens.
    if course.user_id != current_user.id:
        logger.info(
            'User %s %s course %s owned by user %s',
            current_user.id,
            action,
            course.id,
            course.user_id,
        )


@router.get('/courses', response_model=CourseListResponse)
def list_courses(db: Session = Depends(get_db)):
    courses = course_store.list_courses_with_owner(db)
    return CourseListResponse(courses=[to_course_with_owner_response(course) for course in courses])


@router.get('/courses/{course_id}', response_model=CourseResponse)
def get_course(course_id: int, db: Session = Depends(get_db)):
    return to_course_response(get_course_or_404(course_id, db))


@router.post('/courses', status_code=status.HTTP_201_CREATED)
def create_course(
    data: CourseRequest | None = None,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    fields = validated_course_fields(data)
    course = course_store.create_course(db, **fields)
    log_foreign_course_access('created', course, current_user)

    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={'Location': f'api/courses/{course.id}'},
    )


@router.put('/courses/{course_id}', status_code=status.HTTP_204_NO_CONTENT)
def update_course(
    course_id: int,
    data: CourseRequest | None = None,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    fields = validated_course_fields(data)
    course = get_course_or_404(course_id, db)
    log_foreign_course_access('updated', course, current_user)
    course_store.update_course(db, course, fields)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete('/courses/{course_id}', status_code=status.HTTP_204_NO_CONTENT)
def delete_course(
    course_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    course = get_course_or_404(course_id, db)
    log_foreign_course_access('deleted', course, current_user)
    course_store.delete_course(db, course)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
