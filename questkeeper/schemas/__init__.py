from questkeeper.schemas.auth import (
    AuthOutSchema,
    IdentityOutSchema,
    LoginSchema,
    MessageSchema,
    SignUpSchema,
    UpdatePlayerSchema,
    UserOutSchema,
)
from questkeeper.schemas.content import ItemOutSchema, MonsterOutSchema, StoryOutSchema
from questkeeper.schemas.progress import (
    LoadProgressOutSchema,
    SavedGameSchema,
    SavedSummarySchema,
    SaveProgressOutSchema,
    SaveProgressSchema,
)

__all__ = [
    "AuthOutSchema",
    "IdentityOutSchema",
    "LoginSchema",
    "MessageSchema",
    "SignUpSchema",
    "UpdatePlayerSchema",
    "UserOutSchema",
    "ItemOutSchema",
    "MonsterOutSchema",
    "StoryOutSchema",
    "LoadProgressOutSchema",
    "SavedGameSchema",
    "SavedSummarySchema",
    "SaveProgressOutSchema",
    "SaveProgressSchema",
]
