"""API routers for the recipeshelf application."""

from recipeshelf.routers.imports import router as imports_router
from recipeshelf.routers.ingredients import router as ingredients_router
from recipeshelf.routers.recipes import router as recipes_router
from recipeshelf.routers.shopping_lists import router as shopping_lists_router

__all__ = [
    "imports_router",
    "ingredients_router",
    "recipes_router",
    "shopping_lists_router",
]
