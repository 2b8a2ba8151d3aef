"""
Redis User Store - Redis-backed credential store.
"""

from typing import Optional
import json
from session_gate.ports.user_store_port import UserStorePort
from session_gate.domain.user import User
from session_gate.errors import Conflict


class RedisUserStore(UserStorePort):
    """
    Redis-backed user storage.

    All users live in one hash keyed by username. HSETNX makes the
    uniqueness check and the insert a single atomic command, so concurrent
    registrations across workers cannot both succeed.
    """

    def __init__(
        self,
        redis_client=None,
        redis_url: str = "redis://localhost:6379/0",
        prefix: str = "session-gate:",
    ):
        """
        Initialize Redis user store.

        Args:
            redis_client: Redis client instance (redis.Redis)
            redis_url: URL used when no client is given
            prefix: Key prefix
        """
        self._redis = redis_client
        self._redis_url = redis_url
        self._prefix = prefix

    def _get_redis(self):
        """Lazy load Redis client."""
        if self._redis is None:
            try:
                import redis
                self._redis = redis.Redis.from_url(
                    self._redis_url,
                    decode_responses=True,
                )
            except ImportError:
                raise ImportError("redis package required: pip install redis")
        return self._redis

    @property
    def _key(self) -> str:
        """Redis hash holding every user record."""
        return f"{self._prefix}users"

    def add(self, user: User) -> None:
        """
        Insert a user into Redis.

        Args:
            user: User to insert

        Raises:
            Conflict: If the username is already taken
        """
        redis = self._get_redis()
        created = redis.hsetnx(self._key, user.username, json.dumps(user.to_record()))
        if not created:
            raise Conflict()

    def get(self, username: str) -> Optional[User]:
        """
        Get a user from Redis.

        Args:
            username: Username

        Returns:
            User if found and decodable, None otherwise
        """
        redis = self._get_redis()
        data = redis.hget(self._key, username)
        if not data:
            return None

        try:
            return User.from_record(json.loads(data))
        except (json.JSONDecodeError, KeyError, ValueError):
            return None

    def exists(self, username: str) -> bool:
        """Check whether a username is registered."""
        return bool(self._get_redis().hexists(self._key, username))
