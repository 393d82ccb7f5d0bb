"""Queries over the read-only chapter content."""
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from questkeeper.models.content import Effect, Item, Monster, Story, StoryItem, StoryMonster


async def get_chapter(db: AsyncSession, chapter_id: int) -> list[Story]:
    result = await db.execute(
        select(Story).where(Story.chapter_id == chapter_id).order_by(Story.story_id)
    )
    return list(result.scalars().all())


async def get_chapter_items(db: AsyncSession, chapter_id: int) -> list[dict]:
    """Items placed in a chapter, each merged with its effect (if any)."""
    result = await db.execute(
        select(Item, Effect)
        .join(StoryItem, StoryItem.item_id == Item.item_id)
        .outerjoin(Effect, Item.effect_id == Effect.effect_id)
        .where(StoryItem.chapter_id == chapter_id)
        .order_by(Item.item_id)
    )
    rows = []
    for item, effect in result.all():
        row = {
            "item_id": item.item_id,
            "item_name": item.item_name,
            "description": item.description,
            "effect_id": item.effect_id,
            "effect_name": None,
            "attribute": None,
            "amount": None,
        }
        if effect is not None:
            row.update(effect_name=effect.effect_name, attribute=effect.attribute, amount=effect.amount)
        rows.append(row)
    return rows


async def get_chapter_enemies(db: AsyncSession, chapter_id: int) -> list[Monster]:
    result = await db.execute(
        select(Monster)
        .join(StoryMonster, StoryMonster.monster_id == Monster.monster_id)
        .where(StoryMonster.chapter_id == chapter_id)
        .order_by(Monster.monster_id)
    )
    return list(result.scalars().all())
