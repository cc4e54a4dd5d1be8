import logging
from typing import Annotated

from fastapi import Depends

from application.services import ConversionService, RateResolver
from config.settings import Settings, get_settings
from domain.exceptions.currency import ConfigurationError
from infrastructure.cache.memory_cache import RateCache
from infrastructure.providers import ExchangeRateHostProvider

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for process-wide singleton dependencies."""

	provider: ExchangeRateHostProvider | None = None
	rate_cache: RateCache | None = None
	resolver: RateResolver | None = None


deps = AppDependencies()


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	deps.provider = ExchangeRateHostProvider(
		base_url=settings.EXCHANGERATE_HOST_URL,
		timeout=settings.UPSTREAM_TIMEOUT_SECONDS,
	)
	deps.rate_cache = RateCache(ttl_seconds=settings.RATE_CACHE_TTL_SECONDS)
	deps.resolver = RateResolver(provider=deps.provider, cache=deps.rate_cache)
	logger.info('Dependencies initialized')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.provider:
		await deps.provider.close()
	deps.provider = None
	deps.rate_cache = None
	deps.resolver = None

	logger.info('Cleanup complete')


def get_access_key(settings: Settings) -> str:
	if not settings.EXCHANGERATE_HOST_ACCESS_KEY:
		raise ConfigurationError('Server is missing EXCHANGERATE_HOST_ACCESS_KEY environment variable.')
	return settings.EXCHANGERATE_HOST_ACCESS_KEY


def get_rate_cache() -> RateCache:
	if deps.rate_cache is None:
		raise RuntimeError('Rate cache not initialized')
	return deps.rate_cache


def get_rate_resolver() -> RateResolver:
	if deps.resolver is None:
		raise RuntimeError('Rate resolver not initialized')
	return deps.resolver


def get_conversion_service(
	resolver: Annotated[RateResolver, Depends(get_rate_resolver)],
) -> ConversionService:
	return ConversionService(resolver=resolver)
