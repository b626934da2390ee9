"""
Admin authentication and session management
"""

import logging
import secrets
from datetime import timedelta
from typing import Optional

import bcrypt
import redis.asyncio as redis
from redis.exceptions import RedisError

from suitehub.core.config import settings
from suitehub.core.errors import InvalidCredentialsError, StoreUnavailableError, ValidationError
from suitehub.models import SessionRecord
from suitehub.services import keys
from suitehub.services.store_client import require_store
from suitehub.utils.time_windows import utc_now

logger = logging.getLogger(__name__)

# bcrypt only reads this many bytes of a password
BCRYPT_MAX_BYTES = 72


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # malformed hash or a password bcrypt refuses to process
        return False


class AuthService:
    """Single shared admin credential plus opaque session tokens"""

    def __init__(self, store: Optional[redis.Redis]):
        self.store = store

    async def login(self, password: str) -> str:
        """Check the admin password and open a session; returns the new token"""
        if not password:
            raise ValidationError("Password is required")

        store = require_store(self.store)
        try:
            stored_hash = await store.get(keys.admin_password_key())
            if stored_hash is None:
                await self._provision_credential(store, password)
            elif not verify_password(password, stored_hash):
                raise InvalidCredentialsError()
            token = await self._create_session(store)
        except RedisError as e:
            raise StoreUnavailableError(str(e)) from e

        logger.info("Admin logged in")
        return token

    async def _provision_credential(self, store: redis.Redis, password: str) -> None:
        """First login: match the configured secret, then persist its hash.

        After this the plaintext secret is never consulted again.
        """
        secret = settings.ADMIN_PASSWORD
        if not secret:
            raise InvalidCredentialsError("Admin password not configured")
        if len(secret.encode("utf-8")) > BCRYPT_MAX_BYTES:
            logger.error(f"ADMIN_PASSWORD is longer than {BCRYPT_MAX_BYTES} bytes and cannot be hashed")
            raise InvalidCredentialsError("Admin password not configured")
        if not secrets.compare_digest(password.encode("utf-8"), secret.encode("utf-8")):
            raise InvalidCredentialsError()

        created = await store.set(keys.admin_password_key(), hash_password(secret), nx=True)
        if created:
            logger.info("Admin credential hash created")

    async def _create_session(self, store: redis.Redis) -> str:
        token = secrets.token_urlsafe(32)
        now = utc_now()
        record = SessionRecord(
            created_at=now,
            expires_at=now + timedelta(seconds=settings.SESSION_TTL_SECONDS),
        )
        await store.set(keys.session_key(token), record.to_json(), ex=settings.SESSION_TTL_SECONDS)
        return token

    async def validate(self, token: Optional[str]) -> bool:
        """True when the token has a live session record"""
        if not token:
            return False
        try:
            store = require_store(self.store)
            return await store.get(keys.session_key(token)) is not None
        except (StoreUnavailableError, RedisError) as e:
            logger.error(f"Session validation failed: {e}")
            return False

    async def logout(self, token: Optional[str]) -> None:
        if not token or self.store is None:
            return
        try:
            await self.store.delete(keys.session_key(token))
        except RedisError as e:
            logger.error(f"Failed to delete session: {e}")
        logger.info("Admin logged out")
