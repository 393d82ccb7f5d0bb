"""Save-game routes. The owner always comes from the token, never the body."""
from typing import Annotated

from fastapi import APIRouter, Depends

from questkeeper.routers.deps import CurrentIdentity, get_progress_store
from questkeeper.schemas.auth import MessageSchema
from questkeeper.schemas.progress import (
    LoadProgressOutSchema,
    SavedGameSchema,
    SavedSummarySchema,
    SaveProgressOutSchema,
    SaveProgressSchema,
)
from questkeeper.services.progress import ProgressStore

router = APIRouter(tags=["progress"])

Progress = Annotated[ProgressStore, Depends(get_progress_store)]


@router.post("/save-progress", response_model=SaveProgressOutSchema)
async def save_progress(body: SaveProgressSchema, identity: CurrentIdentity, store: Progress):
    progress = await store.save(
        owner=identity.user_id,
        story_id=body.story_id,
        chapter_id=body.chapter_id,
        game_state=body.game_state,
        inventory=body.inventory,
        save_name=body.save_name,
    )
    return SaveProgressOutSchema(saved_progress=SavedSummarySchema.model_validate(progress))


@router.get("/load-progress", response_model=LoadProgressOutSchema)
async def load_progress(identity: CurrentIdentity, store: Progress):
    """Most recent save of the caller; 404 when there is none."""
    progress = await store.load_latest(identity.user_id)
    return LoadProgressOutSchema(saved_game_data=SavedGameSchema.model_validate(progress))


@router.delete("/delete-progress/{progress_id}", response_model=MessageSchema)
async def delete_progress(progress_id: int, identity: CurrentIdentity, store: Progress):
    """404 both when the slot is missing and when it belongs to someone else."""
    await store.delete(identity.user_id, progress_id)
    return MessageSchema(message="Saved game deleted successfully.")
