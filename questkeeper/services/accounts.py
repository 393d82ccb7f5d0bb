"""Sign-up and login flows on top of the credential store and session manager."""
import logging

from starlette.concurrency import run_in_threadpool

from questkeeper.core.errors import InvalidCredential
from questkeeper.core.security import get_pwd_context, hash_password_async, verify_password_async
from questkeeper.models.user import User
from questkeeper.services.credentials import CredentialStore
from questkeeper.services.sessions import SessionManager

logger = logging.getLogger(__name__)


async def sign_up(
    credentials: CredentialStore,
    sessions: SessionManager,
    username: str,
    password: str,
    adventurer_name: str,
) -> tuple[User, str]:
    """Create the account and log it in. Raises DuplicateUsername."""
    password_hash = await hash_password_async(password)
    user = await credentials.create_user(username, password_hash, adventurer_name)
    token = await sessions.issue(user.id, user.username)
    logger.info("New user %s signed up", user.id)
    return user, token


async def log_in(
    credentials: CredentialStore,
    sessions: SessionManager,
    username: str,
    password: str,
) -> tuple[User, str]:
    """Check the password and issue a token that supersedes any earlier one.

    Unknown username and wrong password raise the same InvalidCredential.
    """
    user = await credentials.find_by_username(username)
    if user is None:
        # Hash anyway so both failure paths take similar time
        await run_in_threadpool(get_pwd_context().dummy_verify)
        raise InvalidCredential()
    if not await verify_password_async(password, user.password_hash):
        logger.info("Failed login for user %s", user.id)
        raise InvalidCredential()

    token = await sessions.issue(user.id, user.username)
    logger.info("User %s logged in", user.id)
    return user, token
