import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from api.dependencies import cleanup_dependencies, init_dependencies
from api.error_handlers import register_exception_handlers
from api.routes import btc, health
from config.log_config import configure_logging
from config.settings import get_settings

settings = get_settings()

configure_logging(level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
	logger.info('Starting BTC Converter API...')

	init_dependencies()
	if not settings.EXCHANGERATE_HOST_ACCESS_KEY:
		logger.warning('EXCHANGERATE_HOST_ACCESS_KEY is not set; conversions will fail')

	logger.info('Application ready')

	yield

	logger.info('Shutting down...')
	await cleanup_dependencies()


app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG, lifespan=lifespan)

app.include_router(btc.router)
app.include_router(health.router)
register_exception_handlers(app)
