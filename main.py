import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import config
from database import get_session_context, init_db
from routers.apartments import router as apartments_router
from routers.error_handlers import register_error_handlers
from seed import seed_database
from utils.log_config import setup_logging

setup_logging(config.LOG_LEVEL, config.LOG_FORMAT)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Development: create tables and load the sample apartments
    if config.APP_ENV == "development":
        init_db()
        with get_session_context() as db:
            seed_database(db)
    logger.info(f"Apartments API started (env={config.APP_ENV})")
    yield


# App instance
app = FastAPI(
    title="Apartments API",
    description="API for managing apartments",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH"],
    allow_headers=["*"],
)

register_error_handlers(app)
app.include_router(apartments_router)


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=config.PORT, reload=config.APP_ENV == "development")
