# __init__.py
from app.schemas.auth import LoginRequest, SessionStatus, Token
from app.schemas.base import CamelModel, PartialUpdate, SuccessResponse
from app.schemas.contact import ContactMessageCreate, ContactMessageRead
from app.schemas.content import AboutContent, ContactContent, HeroContent, PortfolioContentRead
from app.schemas.experience import ExperienceCreate, ExperienceRead, ExperienceUpdate
from app.schemas.github import GithubRepo
from app.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate
from app.schemas.skills import SkillCreate, SkillRead, SkillUpdate
from app.schemas.upload import UploadResponse
from app.schemas.user import UserCreate, UserRecord

__all__ = [
	"LoginRequest",
	"SessionStatus",
	"Token",
	"CamelModel",
	"PartialUpdate",
	"SuccessResponse",
	"ContactMessageCreate",
	"ContactMessageRead",
	"AboutContent",
	"ContactContent",
	"HeroContent",
	"PortfolioContentRead",
	"ExperienceCreate",
	"ExperienceRead",
	"ExperienceUpdate",
	"GithubRepo",
	"ProjectCreate",
	"ProjectRead",
	"ProjectUpdate",
	"SkillCreate",
	"SkillRead",
	"SkillUpdate",
	"UploadResponse",
	"UserCreate",
	"UserRecord",
]
