from fastapi import FastAPI
from harvestdoc.core.config import settings
from harvestdoc.api import harvest

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

# Single export route
app.include_router(harvest.router, tags=["harvest"])
