"""SavedProgress model: one row per save action. Latest = highest id per user."""
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, JSON
from sqlalchemy.sql import func

from questkeeper.db.session import Base


class SavedProgress(Base):
    __tablename__ = "user_progress"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    story_id = Column(Integer, nullable=True)
    chapter_id = Column(Integer, nullable=True)
    game_state = Column(JSON, nullable=True)
    inventory = Column(JSON, nullable=True)
    save_name = Column(String(128), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=True)
