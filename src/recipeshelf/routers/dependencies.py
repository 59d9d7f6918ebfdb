"""Shared FastAPI dependencies and error translation."""

from collections.abc import AsyncIterator
from typing import Annotated

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from recipeshelf.database import get_db, get_sync_db
from recipeshelf.engine import IngredientEngine
from recipeshelf.exceptions import InvalidInputError, NotFoundError, RecipeShelfError


def get_owner_id(
    x_user_id: Annotated[str | None, Header(description="Caller identity")] = None,
) -> str:
    """Identity of the caller. Authentication itself happens upstream."""
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="X-User-Id header is required",
        )
    return x_user_id.strip()


async def get_ingredient_engine(
    db: AsyncSession = Depends(get_db),
) -> AsyncIterator[IngredientEngine]:
    """Engine with a knowledge base snapshot loaded for this request."""
    engine = await db.run_sync(IngredientEngine.from_session)
    try:
        yield engine
    finally:
        engine.close()


def http_error(error: RecipeShelfError) -> HTTPException:
    """Map service exceptions onto HTTP responses."""
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, InvalidInputError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error))


OwnerId = Annotated[str, Depends(get_owner_id)]
DbSession = Annotated[AsyncSession, Depends(get_db)]
BatchSession = Annotated[Session, Depends(get_sync_db)]
Engine = Annotated[IngredientEngine, Depends(get_ingredient_engine)]
