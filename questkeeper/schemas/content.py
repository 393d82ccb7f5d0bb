"""Pydantic schemas for chapter content."""
from pydantic import BaseModel


class StoryOutSchema(BaseModel):
    story_id: int
    chapter_id: int
    title: str
    body: str
    next_chapter_id: int | None = None

    class Config:
        from_attributes = True


class ItemOutSchema(BaseModel):
    item_id: int
    item_name: str
    description: str | None = None
    effect_id: int | None = None
    effect_name: str | None = None
    attribute: str | None = None
    amount: int | None = None


class MonsterOutSchema(BaseModel):
    monster_id: int
    monster_name: str
    health: int
    attack: int
    defense: int
    description: str | None = None

    class Config:
        from_attributes = True
