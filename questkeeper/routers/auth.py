"""Auth routes: sign-up, login, logout, player updates. Bearer-token auth."""
from typing import Annotated

from fastapi import APIRouter, Depends

from questkeeper.routers.deps import (
    CurrentIdentity,
    get_credential_store,
    get_session_manager,
)
from questkeeper.schemas.auth import (
    AuthOutSchema,
    IdentityOutSchema,
    LoginSchema,
    MessageSchema,
    SignUpSchema,
    UpdatePlayerSchema,
    UserOutSchema,
)
from questkeeper.services.accounts import log_in, sign_up
from questkeeper.services.credentials import CredentialStore
from questkeeper.services.sessions import SessionManager

router = APIRouter(tags=["auth"])

Credentials = Annotated[CredentialStore, Depends(get_credential_store)]
Sessions = Annotated[SessionManager, Depends(get_session_manager)]


@router.post("/sign-up", response_model=AuthOutSchema)
async def sign_up_post(body: SignUpSchema, credentials: Credentials, sessions: Sessions):
    """Create an account and return it with its first token."""
    user, token = await sign_up(credentials, sessions, body.username, body.password, body.adventurer_name)
    return AuthOutSchema(user=UserOutSchema.model_validate(user), token=token)


@router.post("/login", response_model=AuthOutSchema)
async def login_post(body: LoginSchema, credentials: Credentials, sessions: Sessions):
    """Authenticate; the returned token replaces any token issued before."""
    user, token = await log_in(credentials, sessions, body.username, body.password)
    return AuthOutSchema(user=UserOutSchema.model_validate(user), token=token)


@router.post("/logout", response_model=MessageSchema)
async def logout_post(identity: CurrentIdentity, sessions: Sessions):
    await sessions.revoke(identity.user_id)
    return MessageSchema(message="Logout successful")


@router.post("/update-player", response_model=MessageSchema)
async def update_player_post(body: UpdatePlayerSchema, identity: CurrentIdentity, credentials: Credentials):
    await credentials.update_display_name(identity.user_id, body.new_adventurer_name)
    return MessageSchema(message="Saved Adventurer Name successfully.")


@router.get("/game", response_model=IdentityOutSchema)
async def game_get(identity: CurrentIdentity):
    """Who the presented token belongs to."""
    return IdentityOutSchema(user_id=identity.user_id, username=identity.username)
