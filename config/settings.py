from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	EXCHANGERATE_HOST_ACCESS_KEY: str = ''
	EXCHANGERATE_HOST_URL: str = 'https://api.exchangerate.host/live'
	# None keeps the HTTP client's default timeout
	UPSTREAM_TIMEOUT_SECONDS: float | None = None

	RATE_CACHE_TTL_SECONDS: int = 30 * 60

	# CDN caching headers
	CDN_S_MAXAGE_SECONDS: int = 30 * 60
	CDN_STALE_WHILE_REVALIDATE_SECONDS: int = 24 * 60 * 60

	# Application
	APP_NAME: str = 'BTC Converter API'
	DEBUG: bool = False
	LOG_LEVEL: str = 'INFO'
	LOG_JSON: bool = False

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
