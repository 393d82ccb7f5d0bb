"""Pydantic schemas for save slots."""
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class SaveProgressSchema(BaseModel):
    story_id: int | None = Field(default=None, alias="storyId")
    chapter_id: int | None = Field(default=None, alias="chapterId")
    game_state: Any = Field(default=None, alias="gameState")
    inventory: Any = None
    save_name: str = Field(alias="saveName", min_length=1, max_length=128)

    class Config:
        populate_by_name = True


class SavedSummarySchema(BaseModel):
    id: int
    save_name: str = Field(serialization_alias="saveName")

    class Config:
        from_attributes = True


class SaveProgressOutSchema(BaseModel):
    saved_progress: SavedSummarySchema = Field(serialization_alias="savedProgress")


class SavedGameSchema(BaseModel):
    id: int
    user_id: int = Field(serialization_alias="userId")
    story_id: int | None = Field(serialization_alias="storyId")
    chapter_id: int | None = Field(serialization_alias="chapterId")
    game_state: Any = Field(serialization_alias="gameState")
    inventory: Any
    save_name: str = Field(serialization_alias="saveName")
    created_at: datetime | None = Field(default=None, serialization_alias="createdAt")

    class Config:
        from_attributes = True


class LoadProgressOutSchema(BaseModel):
    saved_game_data: SavedGameSchema = Field(serialization_alias="savedGameData")
