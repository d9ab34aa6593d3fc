"""
Export endpoint: POST a Harvest API location, receive its concepts as CSV.
"""
import io
import logging

from fastapi import APIRouter, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import PlainTextResponse, Response
from pydantic import ValidationError

from harvestdoc.connectors.harvest import HarvestConnector
from harvestdoc.core.errors import EncodeError, SourceError
from harvestdoc.schemas.harvest import HarvestRequest
from harvestdoc.services.export_service import export_concepts

logger = logging.getLogger(__name__)

UNPROCESSABLE_ENTITY = 422

router = APIRouter()


def render_catalog(harvest: HarvestRequest) -> str:
    """Fetch the requested catalog and return the whole CSV document."""
    buffer = io.StringIO()
    with HarvestConnector(harvest.url or "", token=harvest.token or "") as source:
        export_concepts(source, buffer)
    return buffer.getvalue()


@router.post("/")
async def export_csv(request: Request):
    """
    Export the concept catalog of a Harvest API as CSV.

    Body: {"url": "<api endpoint>", "token": "<api token>"}

    The CSV is rendered in memory before responding, so every error
    response carries only the error text:
    - 422: body is not a JSON object of the expected shape
    - 503: the Harvest API could not be fetched or decoded
    - 500: the CSV could not be written
    """
    body = await request.body()

    try:
        harvest = HarvestRequest.model_validate_json(body)
    except ValidationError as e:
        logger.warning(f"Rejected export request body: {e}")
        return PlainTextResponse(str(e), status_code=UNPROCESSABLE_ENTITY)

    try:
        content = await run_in_threadpool(render_catalog, harvest)
    except SourceError as e:
        logger.error(f"Catalog fetch from {harvest.url} failed: {e}")
        return PlainTextResponse(str(e), status_code=status.HTTP_503_SERVICE_UNAVAILABLE)
    except EncodeError as e:
        logger.error(f"CSV export for {harvest.url} failed: {e}")
        return PlainTextResponse(str(e), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return Response(content=content, media_type="text/csv")
