import logging

from django.conf import settings
from django.core.cache import caches

from core.exceptions import capture_exception

logger = logging.getLogger(__name__)


class IdempotencyStore:
    """
    Remembers which Post a caller's idempotency key produced, so a retried
    submission gets the original Post back instead of a duplicate.

    The cache is not authoritative, so it fails open: if the backend errors,
    lookups behave like misses and recordings are dropped. That favours
    letting people post over strict deduplication.
    """

    KEY_FORMAT = "idempotency:status:{author_id}:{token}"

    def __init__(self, cache=None, ttl: int | None = None):
        self.cache = cache if cache is not None else caches["default"]
        self.ttl = ttl if ttl is not None else settings.IDEMPOTENCY_TTL

    def key(self, author_id: int, token: str) -> str:
        return self.KEY_FORMAT.format(author_id=author_id, token=token)

    def lookup(self, author_id: int, token: str) -> int | None:
        """
        Returns the Post ID recorded against this key, if any
        """
        try:
            value = self.cache.get(self.key(author_id, token))
        except Exception as e:
            logger.warning("Idempotency lookup failed, treating as a miss: %s", e)
            capture_exception(e)
            return None
        if value is None:
            return None
        try:
            return int(value)
        except (TypeError, ValueError):
            logger.warning("Ignoring malformed idempotency value %r", value)
            return None

    def record(self, author_id: int, token: str, post_id: int, ttl: int | None = None):
        """
        Stores (or overwrites, restarting the expiry) the Post ID for this key
        """
        try:
            self.cache.set(
                self.key(author_id, token),
                post_id,
                timeout=ttl if ttl is not None else self.ttl,
            )
        except Exception as e:
            logger.warning("Could not record idempotency key: %s", e)
            capture_exception(e)
