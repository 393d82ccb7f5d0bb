"""SQLAlchemy declarative base and model imports for Alembic."""
from questkeeper.db.session import Base

# Import all models so Alembic can see them
from questkeeper.models.content import Effect, Item, Monster, Story, StoryItem, StoryMonster  # noqa: F401
from questkeeper.models.progress import SavedProgress  # noqa: F401
from questkeeper.models.user import User  # noqa: F401

__all__ = ["Base", "User", "SavedProgress", "Story", "Item", "Effect", "Monster", "StoryItem", "StoryMonster"]
