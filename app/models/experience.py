from sqlalchemy import Boolean, Column, Integer, String, Text
from app.database import Base


class Experience(Base):
    __tablename__ = "experiences"

    id = Column(Integer, primary_key=True, index=True)
    position = Column(String(255), nullable=False)
    company = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    start_date = Column(String(32), nullable=False)
    # NULL means the position is current.
    end_date = Column(String(32), nullable=True)
    is_visible = Column(Boolean, nullable=False, default=True)
    # Display order, lower first. Collisions are allowed.
    order = Column("order", Integer, nullable=False, default=0)
