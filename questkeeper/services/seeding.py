"""Seed the built-in chapters, items and monsters into an empty database."""
import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from questkeeper.models.content import Effect, Item, Monster, Story, StoryItem, StoryMonster

logger = logging.getLogger(__name__)

SEED_EFFECTS = [
    {"effect_id": 1, "effect_name": "Heal", "attribute": "health", "amount": 20},
    {"effect_id": 2, "effect_name": "Sharpen", "attribute": "attack", "amount": 3},
    {"effect_id": 3, "effect_name": "Ward", "attribute": "defense", "amount": 2},
]

SEED_ITEMS = [
    {"item_id": 1, "item_name": "Healing Draught", "description": "A bitter red tonic.", "effect_id": 1},
    {"item_id": 2, "item_name": "Whetstone", "description": "Keeps a blade keen.", "effect_id": 2},
    {"item_id": 3, "item_name": "Oak Charm", "description": "Carved by a village elder.", "effect_id": 3},
    {"item_id": 4, "item_name": "Torn Map", "description": "Half of a map to the keep.", "effect_id": None},
]

SEED_MONSTERS = [
    {"monster_id": 1, "monster_name": "Cave Rat", "health": 8, "attack": 2, "defense": 0,
     "description": "Bigger than it has any right to be."},
    {"monster_id": 2, "monster_name": "Bandit", "health": 20, "attack": 5, "defense": 1,
     "description": "Wants your coin more than your life."},
    {"monster_id": 3, "monster_name": "Keep Warden", "health": 45, "attack": 8, "defense": 4,
     "description": "The last guard of the ruined keep."},
]

SEED_STORIES = [
    {"chapter_id": 1, "title": "The Crossroads",
     "body": "You wake at a crossroads with a torn map and no memory of the night.", "next_chapter_id": 2},
    {"chapter_id": 1, "title": "The Crossroads",
     "body": "A rat scurries from the ditch, eyeing your pack.", "next_chapter_id": 2},
    {"chapter_id": 2, "title": "The Forest Road",
     "body": "A bandit steps out from behind an oak and demands a toll.", "next_chapter_id": 3},
    {"chapter_id": 3, "title": "The Ruined Keep",
     "body": "The keep's gate hangs open. Something heavy paces inside.", "next_chapter_id": None},
]

SEED_STORY_ITEMS = [(1, 4), (1, 1), (2, 2), (3, 3), (3, 1)]
SEED_STORY_MONSTERS = [(1, 1), (2, 2), (3, 3)]


async def seed_content(db: AsyncSession) -> bool:
    """Insert the content set if `stories` is empty. Returns True if it seeded."""
    count = (await db.execute(select(func.count()).select_from(Story))).scalar_one()
    if count:
        return False

    db.add_all(Effect(**e) for e in SEED_EFFECTS)
    db.add_all(Monster(**m) for m in SEED_MONSTERS)
    await db.flush()
    db.add_all(Item(**i) for i in SEED_ITEMS)
    db.add_all(Story(**s) for s in SEED_STORIES)
    await db.flush()
    db.add_all(StoryItem(chapter_id=c, item_id=i) for c, i in SEED_STORY_ITEMS)
    db.add_all(StoryMonster(chapter_id=c, monster_id=m) for c, m in SEED_STORY_MONSTERS)
    await db.commit()
    logger.info("Seeded %d chapters of game content", len({s["chapter_id"] for s in SEED_STORIES}))
    return True
