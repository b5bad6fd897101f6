import logging
from fastapi import FastAPI
from .core.config import settings
from .api.v1 import health, query, samples

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

app = FastAPI(title=settings.APP_NAME)
app.include_router(health.router,  prefix=settings.API_V1_PREFIX)
app.include_router(query.router,   prefix=settings.API_V1_PREFIX)
app.include_router(samples.router, prefix=settings.API_V1_PREFIX)
