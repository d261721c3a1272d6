"""User model definitions."""

from sqlalchemy import Column, Integer, String

from backend.database import Base


class User(Base):
    """Represents a registered user. `password` only ever holds a hash."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column("firstName", String, nullable=False)
    last_name = Column("lastName", String, nullable=False)
    email_address = Column("emailAddress", String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)
