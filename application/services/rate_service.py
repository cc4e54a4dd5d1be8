import asyncio
import logging

from domain.models.currency import CacheEntry, Currency, ResolvedRate, ServedFrom
from domain.services.conversion import derive_btc_per_unit
from infrastructure.cache.memory_cache import RateCache
from infrastructure.providers.exchangerate_host import ExchangeRateHostProvider

logger = logging.getLogger(__name__)


class RateResolver:
    """Serves BTC-per-unit rates from the cache, refreshing it from upstream on a miss.

    Upstream failures propagate unchanged; an expired entry is never used as a
    fallback. Concurrent misses may each fetch, and the last store wins.
    """

    def __init__(self, provider: ExchangeRateHostProvider, cache: RateCache):
        self.provider = provider
        self.cache = cache

    async def _refresh(self, access_key: str, now_unix: int) -> CacheEntry:
        snapshot = await self.provider.fetch_snapshot(access_key)
        return self.cache.store(snapshot, fetched_at=now_unix)

    @staticmethod
    def _log_refresh_failure(task: asyncio.Future) -> None:
        # Retrieves the error even when the requesting caller has gone away.
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.debug(f"Upstream refresh finished with error: {error}")

    async def resolve(self, currency: Currency, now_unix: int, access_key: str) -> ResolvedRate:
        entry = self.cache.get_usable(now_unix)
        if entry is not None:
            ttl_remaining = max(0, entry.expires_at - now_unix)
            logger.debug(
                f"Cache HIT for {currency.value}",
                extra={"extra_data": {"currency": currency.value, "ttl_remaining": ttl_remaining}},
            )
            return ResolvedRate(
                btc_per_unit=derive_btc_per_unit(currency, entry.snapshot),
                as_of_unix=entry.snapshot.timestamp,
                served_from=ServedFrom.CACHE,
                fetched_at_unix=entry.fetched_at,
                ttl_seconds_remaining=ttl_remaining,
            )

        logger.debug(
            f"Cache MISS for {currency.value}",
            extra={"extra_data": {"currency": currency.value, "now_unix": now_unix}},
        )
        # Shielded so an abandoned request still completes the fetch and the cache write.
        refresh = asyncio.ensure_future(self._refresh(access_key, now_unix))
        refresh.add_done_callback(self._log_refresh_failure)
        entry = await asyncio.shield(refresh)
        return ResolvedRate(
            btc_per_unit=derive_btc_per_unit(currency, entry.snapshot),
            as_of_unix=entry.snapshot.timestamp,
            served_from=ServedFrom.UPSTREAM,
            fetched_at_unix=entry.fetched_at,
            ttl_seconds_remaining=self.cache.ttl_seconds,
        )
