"""API routes for bulk recipe import."""

from typing import Any

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field, ValidationError

from recipeshelf.engine import IngredientEngine
from recipeshelf.ingest import preview_import_batch
from recipeshelf.ingest.schemas import ImportPreview, ImportReport
from recipeshelf.logging_config import get_logger
from recipeshelf.recipes.service import RecipeService
from recipeshelf.routers.dependencies import BatchSession, OwnerId
from recipeshelf.tasks.imports import import_recipes_task

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/imports", tags=["imports"])


class ImportRequest(BaseModel):
    """
    Batch of recipes, typically a Mealie export.

    Recipes are validated one by one during the import so that a malformed
    recipe fails alone instead of rejecting the batch.
    """

    recipes: list[dict[str, Any]] = Field(default_factory=list)


class TaskTriggerResponse(BaseModel):
    """Response when triggering a background task."""

    task_id: str
    status: str
    message: str


@router.post("/", response_model=ImportReport)
def import_recipes(
    request: ImportRequest,
    owner_id: OwnerId,
    db: BatchSession,
) -> ImportReport:
    """
    Import recipes and return the full report.

    The whole batch runs in the worker threadpool on the sync engine, like
    the background task does.
    """
    engine = IngredientEngine.from_session(db)
    try:
        return engine.reconcile_import_batch(owner_id, request.recipes, RecipeService(db))
    finally:
        engine.close()


@router.post("/preview", response_model=ImportPreview)
async def preview_import(request: ImportRequest) -> ImportPreview:
    """List the ingredient lines that would be parsed, without parsing or storing."""
    try:
        return preview_import_batch(request.recipes)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=e.errors(include_url=False, include_context=False),
        ) from e


@router.post(
    "/async",
    response_model=TaskTriggerResponse,
    status_code=status.HTTP_202_ACCEPTED,
)
async def import_recipes_async(request: ImportRequest, owner_id: OwnerId) -> TaskTriggerResponse:
    """Queue the import as a background task. Useful with the rate limited remote parser."""
    task = import_recipes_task.delay(owner_id, request.recipes)
    logger.info(f"Queued import of {len(request.recipes)} recipes as task {task.id}")
    return TaskTriggerResponse(
        task_id=task.id,
        status="queued",
        message=f"Import of {len(request.recipes)} recipes queued",
    )
