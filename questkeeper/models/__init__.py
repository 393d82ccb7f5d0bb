from questkeeper.models.user import User
from questkeeper.models.progress import SavedProgress
from questkeeper.models.content import Story, Item, Effect, Monster, StoryItem, StoryMonster

__all__ = ["User", "SavedProgress", "Story", "Item", "Effect", "Monster", "StoryItem", "StoryMonster"]
