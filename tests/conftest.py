import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from backend.auth.passwords import hash_password
from backend.database import Base, build_engine, get_db
from backend.main import app
from backend.models.course import Course
from backend.models.user import User
from backend.stores import user_store

USER_PASSWORD = 'correct horse battery staple'


@pytest.fixture
def engine():
    engine = build_engine('sqlite:///:memory:')
    Base.metadata.create_all(bind=engine, tables=[User.__table__, Course.__table__])
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine, tables=[Course.__table__, User.__table__])
        engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    def _make_user(email_address: str = 'joe@example.com', password: str = USER_PASSWORD, **fields) -> User:
        return user_store.create_user(
            db,
            first_name=fields.get('first_name', 'Joe'),
            last_name=fields.get('last_name', 'Smith'),
            email_address=email_address,
            password=hash_password(password),
        )

    return _make_user


@pytest.fixture
def user_password() -> str:
    return USER_PASSWORD
