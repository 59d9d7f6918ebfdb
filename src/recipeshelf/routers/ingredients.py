"""API routes for ingredient parsing and the knowledge base."""

from typing import Annotated, Any

from fastapi import APIRouter, Query, status
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, Field

from recipeshelf.exceptions import RecipeShelfError
from recipeshelf.kb.models import ModifierType, UnitType
from recipeshelf.kb.service import KnowledgeBaseService
from recipeshelf.logging_config import get_logger
from recipeshelf.routers.dependencies import DbSession, Engine, http_error

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/ingredients", tags=["ingredients"])


# =============================================================================
# Request/Response Schemas
# =============================================================================


class ParseRequest(BaseModel):
    text: str


class ParseManyRequest(BaseModel):
    texts: list[str] = Field(default_factory=list, max_length=500)


class ParseManyResponse(BaseModel):
    parser: str
    results: list[dict[str, Any]]
    total: int


class FindOrCreateRequest(BaseModel):
    """Manually entered ingredient name, created when nothing matches."""

    name: str
    category: str | None = None


class FindOrCreateResponse(BaseModel):
    ingredient: dict[str, Any]
    created: bool


class UnitCreateRequest(BaseModel):
    name: str
    type: str = UnitType.OTHER.value
    abbreviation: str | None = None
    aliases: list[str] = Field(default_factory=list)
    base_unit: str | None = None
    conversion_to_base: float | None = None


class ModifierCreateRequest(BaseModel):
    name: str
    type: str = ModifierType.OTHER.value
    aliases: list[str] = Field(default_factory=list)


class KnowledgeBaseSummary(BaseModel):
    version: str
    ingredients: int
    units: int
    modifiers: int
    conflicts: list[dict[str, Any]]


# =============================================================================
# Parsing
# =============================================================================


@router.post("/parse")
async def parse_ingredient(request: ParseRequest, engine: Engine) -> dict[str, Any]:
    """Parse a single ingredient line."""
    parsed = await run_in_threadpool(engine.parse, request.text)
    return parsed.to_dict()


@router.post("/parse-many", response_model=ParseManyResponse)
async def parse_ingredients(request: ParseManyRequest, engine: Engine) -> ParseManyResponse:
    """
    Parse several lines in order. Each line is parsed independently.

    Parsing runs off the event loop since the remote parser blocks on HTTP
    and pauses between calls.
    """
    logger.info(f"Parsing {len(request.texts)} ingredient lines with {engine.parser.name}")
    parsed = await run_in_threadpool(engine.parse_many, request.texts)
    results = [p.to_dict() for p in parsed]
    return ParseManyResponse(parser=engine.parser.name, results=results, total=len(results))


# =============================================================================
# Knowledge Base
# =============================================================================


@router.get("/")
async def list_ingredients(db: DbSession) -> list[dict[str, Any]]:
    """All known ingredients in matching order."""
    ingredients = await db.run_sync(lambda s: KnowledgeBaseService(s).list_ingredients())
    return [ingredient.to_dict() for ingredient in ingredients]


@router.get("/search")
async def search_ingredients(
    db: DbSession,
    q: Annotated[str, Query(description="Part of an ingredient name")] = "",
    limit: Annotated[int, Query(ge=1, le=100)] = 20,
) -> list[dict[str, Any]]:
    """Search known ingredients by name. Queries shorter than 2 characters return nothing."""
    ingredients = await db.run_sync(
        lambda s: KnowledgeBaseService(s).search_ingredients(q, limit=limit)
    )
    return [ingredient.to_dict() for ingredient in ingredients]


@router.post("/", response_model=FindOrCreateResponse)
async def find_or_create_ingredient(request: FindOrCreateRequest, db: DbSession) -> Any:
    """Resolve a manually entered ingredient, creating it when it is unknown."""
    try:
        ingredient, created = await db.run_sync(
            lambda s: KnowledgeBaseService(s).find_or_create_ingredient(
                request.name, request.category
            )
        )
    except RecipeShelfError as e:
        raise http_error(e) from e

    if created:
        logger.info(f"Created known ingredient '{ingredient.name}' ({ingredient.id})")
    return FindOrCreateResponse(ingredient=ingredient.to_dict(), created=created)


@router.get("/units")
async def list_units(db: DbSession) -> list[dict[str, Any]]:
    units = await db.run_sync(lambda s: KnowledgeBaseService(s).list_units())
    return [unit.to_dict() for unit in units]


@router.post("/units", status_code=status.HTTP_201_CREATED)
async def create_unit(request: UnitCreateRequest, db: DbSession) -> dict[str, Any]:
    try:
        unit = await db.run_sync(
            lambda s: KnowledgeBaseService(s).create_unit(**request.model_dump())
        )
    except RecipeShelfError as e:
        raise http_error(e) from e

    logger.info(f"Created known unit '{unit.name}' ({unit.id})")
    return unit.to_dict()


@router.get("/modifiers")
async def list_modifiers(db: DbSession) -> list[dict[str, Any]]:
    modifiers = await db.run_sync(lambda s: KnowledgeBaseService(s).list_modifiers())
    return [modifier.to_dict() for modifier in modifiers]


@router.post("/modifiers", status_code=status.HTTP_201_CREATED)
async def create_modifier(request: ModifierCreateRequest, db: DbSession) -> dict[str, Any]:
    try:
        modifier = await db.run_sync(
            lambda s: KnowledgeBaseService(s).create_modifier(**request.model_dump())
        )
    except RecipeShelfError as e:
        raise http_error(e) from e

    logger.info(f"Created known modifier '{modifier.name}' ({modifier.id})")
    return modifier.to_dict()


@router.get("/knowledge-base", response_model=KnowledgeBaseSummary)
async def knowledge_base_summary(db: DbSession) -> Any:
    """Counts, version fingerprint and alias conflicts of the current knowledge base."""
    stats = await db.run_sync(lambda s: KnowledgeBaseService(s).snapshot().stats())
    return KnowledgeBaseSummary(**stats)
