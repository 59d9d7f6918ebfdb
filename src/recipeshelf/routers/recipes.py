"""API routes for recipes and manual ingredient review."""

from datetime import datetime
from typing import Annotated, Any

from fastapi import APIRouter, Query, status
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.orm import Session

from recipeshelf.exceptions import RecipeShelfError
from recipeshelf.logging_config import get_logger
from recipeshelf.recipes.service import RecipeService
from recipeshelf.routers.dependencies import DbSession, Engine, OwnerId, http_error
from recipeshelf.schemas import (
    IngredientEdit,
    Instruction,
    RecipeCreate,
    RecipeIngredient,
    RecipeUpdate,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/recipes", tags=["recipes"])


# =============================================================================
# Request/Response Schemas
# =============================================================================


class RecipeCreateRequest(RecipeCreate):
    """Recipe to create. Raw `ingredient_lines` are parsed and appended to `ingredients`."""

    ingredient_lines: list[str] = Field(default_factory=list)


class SplitIngredientRequest(BaseModel):
    ingredients: list[IngredientEdit] = Field(min_length=1)


class RecipeResponse(BaseModel):
    """Stored recipe."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    owner_id: str
    name: str
    description: str | None = None
    servings: int | None = None
    prep_time: str | None = None
    cook_time: str | None = None
    total_time: str | None = None
    source_url: str | None = None
    category: str | None = None
    tags: list[str] = Field(default_factory=list)
    ingredients: list[RecipeIngredient] = Field(default_factory=list)
    instructions: list[Instruction] = Field(default_factory=list)
    has_unparsed_ingredients: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None


class FlagRepairResponse(BaseModel):
    fixed: int
    total: int


def _response(recipe: Any) -> RecipeResponse:
    return RecipeResponse.model_validate(recipe)


# =============================================================================
# Recipes
# =============================================================================


@router.get("/", response_model=list[RecipeResponse])
async def list_recipes(
    owner_id: OwnerId,
    db: DbSession,
    unparsed_only: Annotated[
        bool, Query(description="Only recipes with ingredients needing review")
    ] = False,
) -> Any:
    def run(session: Session) -> list[RecipeResponse]:
        recipes = RecipeService(session).list_recipes(owner_id, unparsed_only=unparsed_only)
        return [_response(r) for r in recipes]

    return await db.run_sync(run)


@router.post("/", response_model=RecipeResponse, status_code=status.HTTP_201_CREATED)
async def create_recipe(
    request: RecipeCreateRequest,
    owner_id: OwnerId,
    db: DbSession,
    engine: Engine,
) -> Any:
    """
    Create a recipe.

    Structured ingredients are stored as sent. Lines in `ingredient_lines`
    go through the configured parser first.
    """
    ingredients = list(request.ingredients)
    if request.ingredient_lines:
        parsed = await run_in_threadpool(engine.parse_many, request.ingredient_lines)
        ingredients.extend(p.to_recipe_ingredient() for p in parsed)
        logger.info(
            f"Parsed {len(parsed)} lines for '{request.name}', "
            f"{sum(1 for p in parsed if not p.parsed)} unmatched"
        )

    data = RecipeCreate(
        **request.model_dump(exclude={"ingredient_lines", "ingredients"}),
        ingredients=ingredients,
    )
    return await db.run_sync(lambda s: _response(RecipeService(s).create(owner_id, data)))


@router.post("/fix-unparsed-flags", response_model=FlagRepairResponse)
async def fix_unparsed_flags(owner_id: OwnerId, db: DbSession) -> Any:
    """Recompute the needs-review flag of every recipe the caller owns."""
    fixed, total = await db.run_sync(lambda s: RecipeService(s).fix_unparsed_flags(owner_id))
    logger.info(f"Flag repair for {owner_id}: fixed {fixed} of {total} recipes")
    return FlagRepairResponse(fixed=fixed, total=total)


@router.get("/{recipe_id}", response_model=RecipeResponse)
async def get_recipe(recipe_id: str, owner_id: OwnerId, db: DbSession) -> Any:
    try:
        return await db.run_sync(lambda s: _response(RecipeService(s).get(owner_id, recipe_id)))
    except RecipeShelfError as e:
        raise http_error(e) from e


@router.put("/{recipe_id}", response_model=RecipeResponse)
async def update_recipe(
    recipe_id: str,
    request: RecipeUpdate,
    owner_id: OwnerId,
    db: DbSession,
) -> Any:
    """Update the fields that were sent. The recipe keeps its id."""

    def run(session: Session) -> RecipeResponse:
        service = RecipeService(session)
        recipe = service.get(owner_id, recipe_id)
        return _response(service.update(recipe, request))

    try:
        return await db.run_sync(run)
    except RecipeShelfError as e:
        raise http_error(e) from e


@router.delete("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_recipe(recipe_id: str, owner_id: OwnerId, db: DbSession) -> None:
    def run(session: Session) -> None:
        service = RecipeService(session)
        service.delete(service.get(owner_id, recipe_id))

    try:
        await db.run_sync(run)
    except RecipeShelfError as e:
        raise http_error(e) from e


# =============================================================================
# Ingredient review
# =============================================================================


@router.put("/{recipe_id}/ingredients/{index}", response_model=RecipeResponse)
async def update_ingredient(
    recipe_id: str,
    index: int,
    request: IngredientEdit,
    owner_id: OwnerId,
    db: DbSession,
) -> Any:
    """Fix one ingredient by hand. The ingredient is marked parsed afterwards."""

    def run(session: Session) -> RecipeResponse:
        service = RecipeService(session)
        recipe = service.get(owner_id, recipe_id)
        return _response(service.update_ingredient(recipe, index, request))

    try:
        return await db.run_sync(run)
    except RecipeShelfError as e:
        raise http_error(e) from e


@router.post("/{recipe_id}/ingredients/{index}/split", response_model=RecipeResponse)
async def split_ingredient(
    recipe_id: str,
    index: int,
    request: SplitIngredientRequest,
    owner_id: OwnerId,
    db: DbSession,
) -> Any:
    """Replace one ingredient with several, e.g. "salt and pepper"."""

    def run(session: Session) -> RecipeResponse:
        service = RecipeService(session)
        recipe = service.get(owner_id, recipe_id)
        return _response(service.split_ingredient(recipe, index, request.ingredients))

    try:
        return await db.run_sync(run)
    except RecipeShelfError as e:
        raise http_error(e) from e
