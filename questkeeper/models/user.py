"""User model: credentials, adventurer name and the single current token."""
from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.sql import func

from questkeeper.db.session import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(64), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    adventurer_name = Column(String(128), nullable=False)
    # The only token the gate accepts for this user; NULL when logged out
    token = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=True)

    def __repr__(self):
        return f"<User(id={self.id}, username={self.username})>"
