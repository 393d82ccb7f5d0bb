"""Session manager: one live bearer token per user.

A token is issued as a signed JWT and at the same time written to the user's
row. `verify` only checks signature and expiry; revocation works because the
request gate also compares the presented token with the stored one, and
`issue`/`revoke` overwrite that stored value.

    NoSession --issue--> Active --issue--> Active --revoke--> NoSession
"""
import hmac
import logging
from datetime import timedelta

from questkeeper.core.security import Identity, create_access_token, decode_access_token
from questkeeper.services.credentials import CredentialStore

logger = logging.getLogger(__name__)


class SessionManager:
    def __init__(self, credentials: CredentialStore, expires_delta: timedelta | None = None):
        self.credentials = credentials
        self.expires_delta = expires_delta

    async def issue(self, user_id: int, username: str) -> str:
        """Sign a new token and make it the user's only valid one.

        The write is committed before the token is handed back.
        """
        token = create_access_token(user_id, username, self.expires_delta)
        await self.credentials.set_token(user_id, token)
        logger.info("Issued session token for user %s", user_id)
        return token

    def verify(self, token: str) -> Identity:
        """Stateless check. Raises InvalidCredential or TokenExpired."""
        return decode_access_token(token)

    async def revoke(self, user_id: int) -> None:
        await self.credentials.set_token(user_id, None)
        logger.info("Revoked session for user %s", user_id)

    async def is_current(self, identity: Identity, token: str) -> bool:
        """True when `token` is still the value stored for the user."""
        stored = await self.credentials.get_token(identity.user_id)
        if stored is None:
            return False
        return hmac.compare_digest(stored.encode("utf-8"), token.encode("utf-8"))

