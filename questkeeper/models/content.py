"""Read-only game content: chapters, items with effects, monsters."""
from sqlalchemy import Column, Integer, String, Text, ForeignKey

from questkeeper.db.session import Base


class Story(Base):
    """One passage of a chapter; a chapter may span several rows."""

    __tablename__ = "stories"

    story_id = Column(Integer, primary_key=True, autoincrement=True)
    chapter_id = Column(Integer, nullable=False, index=True)
    title = Column(String(255), nullable=False)
    body = Column(Text, nullable=False)
    next_chapter_id = Column(Integer, nullable=True)


class Effect(Base):
    __tablename__ = "effect"

    effect_id = Column(Integer, primary_key=True)
    effect_name = Column(String(64), nullable=False)
    attribute = Column(String(32), nullable=False)  # health | attack | defense
    amount = Column(Integer, nullable=False)


class Item(Base):
    __tablename__ = "item"

    item_id = Column(Integer, primary_key=True)
    item_name = Column(String(128), nullable=False)
    description = Column(Text, nullable=True)
    effect_id = Column(Integer, ForeignKey("effect.effect_id"), nullable=True)


class Monster(Base):
    __tablename__ = "monster"

    monster_id = Column(Integer, primary_key=True)
    monster_name = Column(String(128), nullable=False)
    health = Column(Integer, nullable=False)
    attack = Column(Integer, nullable=False)
    defense = Column(Integer, nullable=False, default=0)
    description = Column(Text, nullable=True)


# Link tables; chapter_id is not unique in stories so it carries no FK
class StoryItem(Base):
    __tablename__ = "story_item"

    chapter_id = Column(Integer, primary_key=True)
    item_id = Column(Integer, ForeignKey("item.item_id"), primary_key=True)


class StoryMonster(Base):
    __tablename__ = "story_monster"

    chapter_id = Column(Integer, primary_key=True)
    monster_id = Column(Integer, ForeignKey("monster.monster_id"), primary_key=True)
