"""Chapter content routes: stories, items, enemies. Read-only."""
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from questkeeper.db.session import get_db
from questkeeper.routers.deps import get_current_identity
from questkeeper.schemas.content import ItemOutSchema, MonsterOutSchema, StoryOutSchema
from questkeeper.services.content import get_chapter, get_chapter_enemies, get_chapter_items

router = APIRouter(tags=["content"], dependencies=[Depends(get_current_identity)])


@router.get("/chapter/{chapter_id}", response_model=list[StoryOutSchema])
async def chapter_get(chapter_id: int, db: Annotated[AsyncSession, Depends(get_db)]):
    return await get_chapter(db, chapter_id)


@router.get("/item/{chapter_id}", response_model=list[ItemOutSchema])
async def items_get(chapter_id: int, db: Annotated[AsyncSession, Depends(get_db)]):
    return await get_chapter_items(db, chapter_id)


@router.get("/enemy/{chapter_id}", response_model=list[MonsterOutSchema])
async def enemies_get(chapter_id: int, db: Annotated[AsyncSession, Depends(get_db)]):
    return await get_chapter_enemies(db, chapter_id)
