"""Per-request dependencies: stores bound to the request's DB session, and the gate.

`get_current_identity` is the single check every protected route depends on.
A token passes only if it is well-formed, unexpired, and still equal to the
token stored on the user's row. Logging out or logging in again replaces that
row value, so older tokens stop working before they expire.
"""
import logging
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from questkeeper.core.errors import InvalidCredential, TokenExpired, Unauthorized
from questkeeper.core.security import Identity
from questkeeper.db.session import get_db
from questkeeper.services.credentials import CredentialStore
from questkeeper.services.progress import ProgressStore
from questkeeper.services.sessions import SessionManager

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_credential_store(db: Annotated[AsyncSession, Depends(get_db)]) -> CredentialStore:
    return CredentialStore(db)


def get_session_manager(
    credentials: Annotated[CredentialStore, Depends(get_credential_store)],
) -> SessionManager:
    return SessionManager(credentials)


def get_progress_store(db: Annotated[AsyncSession, Depends(get_db)]) -> ProgressStore:
    return ProgressStore(db)


async def get_current_identity(
    request: Request,
    sessions: Annotated[SessionManager, Depends(get_session_manager)],
    auth: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> Identity:
    if auth is None or not auth.credentials:
        raise Unauthorized()
    token = auth.credentials

    try:
        identity = sessions.verify(token)
    except TokenExpired:
        raise Unauthorized(TokenExpired.message)
    except InvalidCredential:
        logger.info("Rejected malformed token on %s", request.url.path)
        raise Unauthorized()

    if not await sessions.is_current(identity, token):
        logger.info("Rejected revoked token for user %s on %s", identity.user_id, request.url.path)
        raise Unauthorized()

    return identity


CurrentIdentity = Annotated[Identity, Depends(get_current_identity)]
