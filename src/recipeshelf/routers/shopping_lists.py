"""API routes for shopping lists."""

from datetime import datetime
from typing import Any

from fastapi import APIRouter, status
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.orm import Session

from recipeshelf.config import get_settings
from recipeshelf.exceptions import RecipeShelfError
from recipeshelf.logging_config import get_logger
from recipeshelf.models import ShoppingList, ShoppingListItem
from recipeshelf.plan.service import ShoppingListService
from recipeshelf.plan.shopping_list import ShoppingListGenerator
from recipeshelf.routers.dependencies import DbSession, OwnerId, http_error

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/shopping-lists", tags=["shopping-lists"])


def _service(session: Session) -> ShoppingListService:
    generator = ShoppingListGenerator(get_settings().range_reduction)
    return ShoppingListService(session, generator)


# =============================================================================
# Request/Response Schemas
# =============================================================================


class ShoppingListCreateRequest(BaseModel):
    name: str = Field(min_length=1)
    recipe_ids: list[str] = Field(default_factory=list)


class AddRecipesRequest(BaseModel):
    recipe_ids: list[str] = Field(min_length=1)


class ItemCreateRequest(BaseModel):
    name: str = Field(min_length=1)
    quantity: float | None = None
    unit: str | None = None
    note: str | None = None


class ItemUpdateRequest(BaseModel):
    """Partial item edit. Only fields that were sent are applied."""

    name: str | None = None
    quantity: float | None = None
    unit: str | None = None
    note: str | None = None
    is_checked: bool | None = None
    position: int | None = Field(None, ge=0)


class ShoppingListItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    quantity: float | None = None
    unit: str | None = None
    note: str | None = None
    is_checked: bool = False
    position: int = 0
    known_ingredient_id: int | None = None


class ShoppingListResponse(BaseModel):
    id: str
    name: str
    is_complete: bool
    recipe_ids: list[str] = Field(default_factory=list)
    items: list[ShoppingListItemResponse] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ShoppingListSummary(BaseModel):
    id: str
    name: str
    is_complete: bool
    item_count: int
    checked_count: int
    created_at: datetime | None = None


def _to_response(shopping_list: ShoppingList) -> ShoppingListResponse:
    return ShoppingListResponse(
        id=shopping_list.id,
        name=shopping_list.name,
        is_complete=shopping_list.is_complete,
        recipe_ids=[r.id for r in shopping_list.recipes],
        items=[ShoppingListItemResponse.model_validate(i) for i in shopping_list.items],
        created_at=shopping_list.created_at,
        updated_at=shopping_list.updated_at,
    )


def _summary(shopping_list: ShoppingList) -> ShoppingListSummary:
    return ShoppingListSummary(
        id=shopping_list.id,
        name=shopping_list.name,
        is_complete=shopping_list.is_complete,
        item_count=len(shopping_list.items),
        checked_count=sum(1 for i in shopping_list.items if i.is_checked),
        created_at=shopping_list.created_at,
    )


def _item_response(item: ShoppingListItem) -> ShoppingListItemResponse:
    return ShoppingListItemResponse.model_validate(item)


# =============================================================================
# Lists
# =============================================================================
# Responses are built inside run_sync so relationships load on the sync side.


@router.get("/", response_model=list[ShoppingListSummary])
async def list_shopping_lists(owner_id: OwnerId, db: DbSession) -> Any:
    return await db.run_sync(lambda s: [_summary(sl) for sl in _service(s).list_lists(owner_id)])


@router.post("/", response_model=ShoppingListResponse, status_code=status.HTTP_201_CREATED)
async def create_shopping_list(
    request: ShoppingListCreateRequest,
    owner_id: OwnerId,
    db: DbSession,
) -> Any:
    """Create a list with one aggregated line per ingredient and unit."""
    try:
        return await db.run_sync(
            lambda s: _to_response(
                _service(s).create_list(owner_id, request.name, request.recipe_ids)
            )
        )
    except RecipeShelfError as e:
        raise http_error(e) from e


@router.get("/{list_id}", response_model=ShoppingListResponse)
async def get_shopping_list(list_id: str, owner_id: OwnerId, db: DbSession) -> Any:
    try:
        return await db.run_sync(lambda s: _to_response(_service(s).get_list(owner_id, list_id)))
    except RecipeShelfError as e:
        raise http_error(e) from e


@router.delete("/{list_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_shopping_list(list_id: str, owner_id: OwnerId, db: DbSession) -> None:
    try:
        await db.run_sync(lambda s: _service(s).delete_list(owner_id, list_id))
    except RecipeShelfError as e:
        raise http_error(e) from e


@router.post("/{list_id}/recipes", response_model=ShoppingListResponse)
async def add_recipes(
    list_id: str,
    request: AddRecipesRequest,
    owner_id: OwnerId,
    db: DbSession,
) -> Any:
    """
    Append recipes to an existing list.

    Matching lines absorb the new quantities and are unchecked again.
    """
    try:
        return await db.run_sync(
            lambda s: _to_response(_service(s).add_recipes(owner_id, list_id, request.recipe_ids))
        )
    except RecipeShelfError as e:
        raise http_error(e) from e


@router.post("/{list_id}/toggle-complete", response_model=ShoppingListResponse)
async def toggle_complete(list_id: str, owner_id: OwnerId, db: DbSession) -> Any:
    try:
        return await db.run_sync(
            lambda s: _to_response(_service(s).toggle_complete(owner_id, list_id))
        )
    except RecipeShelfError as e:
        raise http_error(e) from e


@router.post("/{list_id}/clear-checked", response_model=ShoppingListResponse)
async def clear_checked(list_id: str, owner_id: OwnerId, db: DbSession) -> Any:
    try:
        return await db.run_sync(
            lambda s: _to_response(_service(s).clear_checked(owner_id, list_id))
        )
    except RecipeShelfError as e:
        raise http_error(e) from e


# =============================================================================
# Items
# =============================================================================


@router.post(
    "/{list_id}/items",
    response_model=ShoppingListItemResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_item(
    list_id: str,
    request: ItemCreateRequest,
    owner_id: OwnerId,
    db: DbSession,
) -> Any:
    def run(session: Session) -> ShoppingListItemResponse:
        item = _service(session).add_item(
            owner_id,
            list_id,
            name=request.name,
            quantity=request.quantity,
            unit=request.unit,
            note=request.note,
        )
        return _item_response(item)

    try:
        return await db.run_sync(run)
    except RecipeShelfError as e:
        raise http_error(e) from e


@router.patch("/{list_id}/items/{item_id}", response_model=ShoppingListItemResponse)
async def update_item(
    list_id: str,
    item_id: int,
    request: ItemUpdateRequest,
    owner_id: OwnerId,
    db: DbSession,
) -> Any:
    changes = request.model_dump(exclude_unset=True)
    try:
        return await db.run_sync(
            lambda s: _item_response(_service(s).update_item(owner_id, list_id, item_id, changes))
        )
    except RecipeShelfError as e:
        raise http_error(e) from e


@router.post("/{list_id}/items/{item_id}/toggle", response_model=ShoppingListItemResponse)
async def toggle_item(list_id: str, item_id: int, owner_id: OwnerId, db: DbSession) -> Any:
    try:
        return await db.run_sync(
            lambda s: _item_response(_service(s).toggle_item(owner_id, list_id, item_id))
        )
    except RecipeShelfError as e:
        raise http_error(e) from e


@router.delete("/{list_id}/items/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_item(list_id: str, item_id: int, owner_id: OwnerId, db: DbSession) -> None:
    try:
        await db.run_sync(lambda s: _service(s).remove_item(owner_id, list_id, item_id))
    except RecipeShelfError as e:
        raise http_error(e) from e
