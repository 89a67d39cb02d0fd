from sqlalchemy import Boolean, Column, Integer, JSON, String, Text
from app.database import Base


class Project(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    tags = Column(JSON, nullable=False, default=list)
    repo_url = Column(String(512), nullable=True)
    demo_url = Column(String(512), nullable=True)
    is_visible = Column(Boolean, nullable=False, default=True)
    is_featured = Column(Boolean, nullable=False, default=False)
