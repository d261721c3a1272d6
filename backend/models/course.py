"""Course model definitions."""

from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from backend.database import Base
from backend.models.user import User


class Course(Base):
    """Represents a course owned by a user."""
    __tablename__ = "courses"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column("userId", Integer, ForeignKey("users.id"), nullable=False)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    estimated_time = Column("estimatedTime", String)
    materials_needed = Column("materialsNeeded", String)

    owner = relationship(User)
