import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from api.dependencies import cleanup_dependencies, init_dependencies
from api.error_handlers import register_exception_handlers
from api.routes import currency, health
from config.logger import setup_logging
from config.settings import get_settings

logger = logging.getLogger(__name__)


settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
	setup_logging(level='DEBUG' if settings.DEBUG else settings.LOG_LEVEL, json_logs=settings.JSON_LOGS)
	logger.info('Starting Currency Exchange API...')

	init_dependencies()
	logger.info('Application ready')

	yield

	logger.info('Shutting down...')
	await cleanup_dependencies()


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

app.include_router(currency.router)
app.include_router(health.router)
register_exception_handlers(app)
