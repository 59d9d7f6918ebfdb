"""Recipe storage and review."""

from recipeshelf.recipes.service import RecipeService, has_unparsed_ingredients

__all__ = ["RecipeService", "has_unparsed_ingredients"]
