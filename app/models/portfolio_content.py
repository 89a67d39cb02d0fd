from sqlalchemy import Column, DateTime, Integer, JSON, String, func
from app.database import Base


class PortfolioContent(Base):
    __tablename__ = "portfolio_content"

    id = Column(Integer, primary_key=True, index=True)
    section = Column(String(64), unique=True, index=True, nullable=False)
    content = Column(JSON, nullable=False, default=dict)
    last_updated = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
