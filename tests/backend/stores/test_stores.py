import pytest

from backend.core.errors import StoreConstraintFailure
from backend.stores import course_store, user_store


def test_find_user_by_email_matches_exact_address(db, make_user) -> None:
    user = make_user('joe@example.com')

    assert user_store.find_user_by_email(db, 'joe@example.com').id == user.id
    assert user_store.find_user_by_email(db, 'someone@example.com') is None


def test_create_user_rejects_duplicate_email_at_store_level(db, make_user) -> None:
    make_user('joe@example.com')

    with pytest.raises(StoreConstraintFailure) as exception_info:
        make_user('joe@example.com')

    assert 'UNIQUE' in exception_info.value.message
    assert exception_info.value.to_response() == {'Validation Error': exception_info.value.message}


def test_create_course_requires_existing_owner(db) -> None:
    with pytest.raises(StoreConstraintFailure) as exception_info:
        course_store.create_course(db, user_id=999, title='Learn', description='All of it')

    assert 'FOREIGN KEY' in exception_info.value.message


def test_create_course_requires_owner(db) -> None:
    with pytest.raises(StoreConstraintFailure) as exception_info:
        course_store.create_course(db, title='Learn', description='All of it')

    assert 'NOT NULL' in exception_info.value.message


def test_create_course_ignores_unknown_fields(db, make_user) -> None:
    user = make_user()

    course = course_store.create_course(
        db,
        user_id=user.id,
        title='Learn',
        description='All of it',
        id=42,
        owner=None,
    )

    assert course.id != 42
    assert course.user_id == user.id


def test_list_courses_with_owner_loads_owner(db, make_user) -> None:
    user = make_user()
    course_store.create_course(db, user_id=user.id, title='First', description='One')
    course_store.create_course(db, user_id=user.id, title='Second', description='Two')

    courses = course_store.list_courses_with_owner(db)

    assert [course.title for course in courses] == ['First', 'Second']
    assert {course.owner.email_address for course in courses} == {'joe@example.com'}


def test_update_and_delete_course(db, make_user) -> None:
    user = make_user()
    course = course_store.create_course(db, user_id=user.id, title='Learn', description='All of it')

    course_store.update_course(db, course, {'title': 'Unlearn', 'materials_needed': 'Patience'})

    stored = course_store.find_course(db, course.id)
    assert stored.title == 'Unlearn'
    assert stored.description == 'All of it'
    assert stored.materials_needed == 'Patience'

    course_store.delete_course(db, stored)

    assert course_store.find_course(db, course.id) is None
