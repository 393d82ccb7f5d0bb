"""Owner-scoped save slots.

The owner is always part of the SQL predicate. A slot that belongs to someone
else looks exactly like a slot that does not exist.
"""
import logging
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from questkeeper.core.errors import NotFound
from questkeeper.models.progress import SavedProgress

logger = logging.getLogger(__name__)


class ProgressStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def save(
        self,
        owner: int,
        story_id: int | None,
        chapter_id: int | None,
        game_state: Any,
        inventory: Any,
        save_name: str,
    ) -> SavedProgress:
        """Insert a new slot; saves never update in place."""
        progress = SavedProgress(
            user_id=owner,
            story_id=story_id,
            chapter_id=chapter_id,
            game_state=game_state,
            inventory=inventory,
            save_name=save_name,
        )
        self.db.add(progress)
        await self.db.commit()
        await self.db.refresh(progress)
        logger.info("User %s saved slot %s", owner, progress.id)
        return progress

    async def load_latest(self, owner: int) -> SavedProgress:
        result = await self.db.execute(
            select(SavedProgress)
            .where(SavedProgress.user_id == owner)
            .order_by(SavedProgress.id.desc())
            .limit(1)
        )
        progress = result.scalar_one_or_none()
        if progress is None:
            raise NotFound("No saved game found.")
        return progress

    async def delete(self, owner: int, progress_id: int) -> int:
        """Delete in one statement whose WHERE carries both id and owner."""
        result = await self.db.execute(
            delete(SavedProgress)
            .where(SavedProgress.id == progress_id, SavedProgress.user_id == owner)
            .execution_options(synchronize_session=False)
        )
        await self.db.commit()
        if result.rowcount != 1:
            raise NotFound("Saved game not found or unauthorized to delete.")
        logger.info("User %s deleted slot %s", owner, progress_id)
        return progress_id
