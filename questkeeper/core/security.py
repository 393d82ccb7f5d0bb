"""Password hashing and signed bearer tokens (JWT)."""
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from functools import lru_cache

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext
from passlib.exc import PasswordSizeError
from starlette.concurrency import run_in_threadpool

from questkeeper.core.config import get_settings
from questkeeper.core.errors import InvalidCredential, TokenExpired

# bcrypt hard limit: 72 bytes (UTF-8)
BCRYPT_MAX_BYTES = 72


@lru_cache
def get_pwd_context() -> CryptContext:
    settings = get_settings()
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.bcrypt_rounds)


def verify_password(plain: str, hashed: str) -> bool:
    """An oversized password is a wrong password, not an error."""
    try:
        return get_pwd_context().verify(plain, hashed)
    except PasswordSizeError:
        return False


def hash_password(password: str) -> str:
    return get_pwd_context().hash(password)


async def hash_password_async(password: str) -> str:
    """bcrypt is CPU bound; keep it off the event loop."""
    return await run_in_threadpool(hash_password, password)


async def verify_password_async(plain: str, hashed: str) -> bool:
    return await run_in_threadpool(verify_password, plain, hashed)


@dataclass(frozen=True)
class Identity:
    """Who a verified token says the caller is."""

    user_id: int
    username: str


def create_access_token(user_id: int, username: str, expires_delta: timedelta | None = None) -> str:
    """Sign a token for (user_id, username).

    A random `jti` makes every issued token distinct, even two issued for the
    same user within the same second.
    """
    settings = get_settings()
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    to_encode = {
        "sub": str(user_id),
        "username": username,
        "iat": int(now.timestamp()),
        "exp": expire,
        "jti": secrets.token_hex(8),
    }
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> Identity:
    """Check signature and expiry only; no storage lookup.

    Raises TokenExpired past `exp` and InvalidCredential for anything else
    that is not a token we signed.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.algorithm],
            options={"require_exp": True},
        )
    except ExpiredSignatureError:
        raise TokenExpired()
    except JWTError:
        raise InvalidCredential("Unauthorized")
    try:
        return Identity(user_id=int(payload["sub"]), username=str(payload["username"]))
    except (KeyError, TypeError, ValueError):
        raise InvalidCredential("Unauthorized")
