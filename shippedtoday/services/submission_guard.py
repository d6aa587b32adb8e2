import logging
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from shippedtoday.core.settings import AntiSpamConfig

logger = logging.getLogger(__name__)


@dataclass
class _Attempts:
    count: int
    last_attempt: float


class SubmissionGuard:
    """
    In-process anti-abuse state

    Tracks the time of the last accepted submission (global cooldown),
    per-client attempt counters (rate limit) and hashes of recently
    accepted content (duplicate detection). Nothing is shared between
    processes or persisted across restarts.
    """

    def __init__(self, settings: Optional[AntiSpamConfig] = None,
                 clock: Callable[[], float] = time.time):
        self.settings = settings or AntiSpamConfig()
        self.clock = clock
        self.last_submission_at: Optional[float] = None
        self._attempts: Dict[str, _Attempts] = {}
        self._recent_hashes: Dict[str, float] = {}

    def is_cooldown_active(self) -> bool:
        if self.last_submission_at is None:
            return False
        return self.clock() - self.last_submission_at < self.settings.global_cooldown_seconds

    def is_rate_limited(self, client_id: str) -> bool:
        attempts = self._attempts.get(client_id)
        if attempts is None:
            return False

        if self.clock() - attempts.last_attempt > self.settings.rate_limit_window_seconds:
            del self._attempts[client_id]
            return False

        return attempts.count >= self.settings.max_attempts_per_window

    def record_attempt(self, client_id: str) -> None:
        now = self.clock()
        attempts = self._attempts.get(client_id)
        if attempts is None or now - attempts.last_attempt > self.settings.rate_limit_window_seconds:
            self._attempts[client_id] = _Attempts(count=1, last_attempt=now)
        else:
            attempts.count += 1
            attempts.last_attempt = now

    def is_duplicate(self, digest: str) -> bool:
        submitted_at = self._recent_hashes.get(digest)
        if submitted_at is None:
            return False
        return self.clock() - submitted_at < self.settings.duplicate_window_seconds

    def remember_submission(self, digest: str) -> None:
        """Start the global cooldown and remember the content hash"""
        now = self.clock()
        self.last_submission_at = now
        self._recent_hashes[digest] = now

        if len(self._recent_hashes) > self.settings.duplicate_cleanup_threshold:
            self._evict_stale_hashes(now)

    def _evict_stale_hashes(self, now: float) -> None:
        cutoff = now - self.settings.duplicate_window_seconds
        stale = [digest for digest, ts in self._recent_hashes.items() if ts < cutoff]
        for digest in stale:
            del self._recent_hashes[digest]
        if stale:
            logger.debug(f"Evicted {len(stale)} stale content hashes")

    @property
    def tracked_hashes(self) -> int:
        return len(self._recent_hashes)
