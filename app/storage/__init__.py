# __init__.py
from app.storage.base import PortfolioStore
from app.storage.memory import MemoryStore
from app.storage.sql import SqlStore

__all__ = [
	"PortfolioStore",
	"MemoryStore",
	"SqlStore",
]
