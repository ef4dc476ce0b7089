"""Password Hashing — bcrypt with a configurable work factor.

Invariants:
    - hash() output is a salted bcrypt string, never equal to the input
    - Hashing runs in a worker thread: the event loop is never blocked
    - Passwords are UTF-8 encoded and cut to bcrypt's 72-byte input limit

Design Decisions:
    - bcrypt directly (no passlib wrapper): one scheme, no migration policy needed
"""

import asyncio
import logging

import bcrypt

logger = logging.getLogger(__name__)

BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


class BcryptHasher:
    """PasswordHasher backed by bcrypt."""

    def __init__(self, rounds: int = 10):
        self.rounds = rounds

    async def hash(self, password: str) -> str:
        return await asyncio.to_thread(self._hash_sync, password)

    async def verify(self, password: str, hashed: str) -> bool:
        return await asyncio.to_thread(self._verify_sync, password, hashed)

    def _hash_sync(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_encode(password), salt).decode("utf-8")

    def _verify_sync(self, password: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(_encode(password), hashed.encode("utf-8"))
        except ValueError:
            logger.error("Stored password hash is not a valid bcrypt hash")
            return False
