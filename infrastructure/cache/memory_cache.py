import logging

from domain.models.currency import CacheEntry, RateSnapshot

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 30 * 60


class RateCache:
    """Single-slot, process-local snapshot cache.

    Freshness is measured from the local fetch time, not the snapshot's own
    timestamp. An entry is unusable once ``now >= expires_at``; nothing stale
    is ever served. Contents are lost on restart.
    """

    def __init__(self, ttl_seconds: int = DEFAULT_TTL_SECONDS):
        self.ttl_seconds = ttl_seconds
        self._entry: CacheEntry | None = None

    @property
    def entry(self) -> CacheEntry | None:
        return self._entry

    def get_usable(self, now_unix: int) -> CacheEntry | None:
        entry = self._entry
        if entry is None or now_unix >= entry.expires_at:
            return None
        return entry

    def store(self, snapshot: RateSnapshot, fetched_at: int) -> CacheEntry:
        entry = CacheEntry(
            snapshot=snapshot,
            fetched_at=fetched_at,
            expires_at=fetched_at + self.ttl_seconds,
        )
        self._entry = entry
        logger.info(f'Cached rate snapshot as of {snapshot.timestamp}, expires at {entry.expires_at}')
        return entry

    def clear(self) -> None:
        self._entry = None
