from app.db.models.user import User, Provider, Role
from app.db.models.board import Board, Tag
from app.db.models.scrap import Scrap, ScrapType

__all__ = ["User", "Provider", "Role", "Board", "Tag", "Scrap", "ScrapType"]
