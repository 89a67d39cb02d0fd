# skills.py
from sqlalchemy import Boolean, Column, Integer, String
from app.database import Base


class Skill(Base):
    __tablename__ = "skills"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    # Free-text grouping key ("DevOps", "Cloud", ...).
    category = Column(String(255), index=True, nullable=False)
    proficiency = Column(Integer, nullable=False)
    is_visible = Column(Boolean, nullable=False, default=True)
