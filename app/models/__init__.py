# __init__.py
from app.models.contact_message import ContactMessage
from app.models.experience import Experience
from app.models.portfolio_content import PortfolioContent
from app.models.project import Project
from app.models.skills import Skill
from app.models.user import User

__all__ = [
	"ContactMessage",
	"Experience",
	"PortfolioContent",
	"Project",
	"Skill",
	"User",
]
