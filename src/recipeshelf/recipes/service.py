"""Recipe storage and ingredient review operations."""

from collections.abc import Iterable
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from recipeshelf.exceptions import InvalidInputError, NotFoundError
from recipeshelf.logging_config import get_logger
from recipeshelf.models import Recipe
from recipeshelf.schemas import IngredientEdit, RecipeCreate, RecipeIngredient, RecipeUpdate

logger = get_logger(__name__)


def has_unparsed_ingredients(ingredients: Iterable[RecipeIngredient | dict[str, Any]]) -> bool:
    """True when any ingredient is not marked parsed. The only source of the recipe flag."""
    for ingredient in ingredients or []:
        if isinstance(ingredient, RecipeIngredient):
            parsed = ingredient.parsed
        else:
            parsed = RecipeIngredient.model_validate(ingredient).parsed
        if not parsed:
            return True
    return False


def _dump_ingredients(ingredients: Iterable[RecipeIngredient]) -> list[dict[str, Any]]:
    return [ingredient.model_dump() for ingredient in ingredients]


class RecipeService:
    """Service layer for recipes owned by one caller at a time."""

    def __init__(self, session: Session):
        self.session = session

    # =========================================================================
    # Queries
    # =========================================================================

    def get(self, owner_id: str, recipe_id: str) -> Recipe:
        recipe = self.session.get(Recipe, recipe_id)
        if recipe is None or recipe.owner_id != owner_id:
            raise NotFoundError("Recipe", recipe_id)
        return recipe

    def list_recipes(self, owner_id: str, unparsed_only: bool = False) -> list[Recipe]:
        query = select(Recipe).where(Recipe.owner_id == owner_id)
        if unparsed_only:
            query = query.where(Recipe.has_unparsed_ingredients.is_(True))
        return list(self.session.scalars(query.order_by(Recipe.name)).all())

    def find_by_name(self, owner_id: str, name: str) -> Recipe | None:
        """Exact-name lookup used for duplicate detection on import."""
        return self.session.scalars(
            select(Recipe).where(Recipe.owner_id == owner_id, Recipe.name == name)
        ).first()

    def find_with_unparsed(self, owner_id: str) -> list[Recipe]:
        return self.list_recipes(owner_id, unparsed_only=True)

    # =========================================================================
    # Mutations
    # =========================================================================

    def _apply(self, recipe: Recipe, fields: dict[str, Any]) -> None:
        for key, value in fields.items():
            if key == "ingredients":
                recipe.ingredients = _dump_ingredients(
                    RecipeIngredient.model_validate(i) for i in value or []
                )
            elif key == "instructions":
                recipe.instructions = [dict(i) for i in value or []]
            elif key == "tags":
                recipe.tags = list(value or [])
            else:
                setattr(recipe, key, value)
        recipe.has_unparsed_ingredients = has_unparsed_ingredients(recipe.ingredients or [])

    def create(self, owner_id: str, data: RecipeCreate) -> Recipe:
        recipe = Recipe(owner_id=owner_id, name=data.name)
        self._apply(recipe, data.model_dump())
        self.session.add(recipe)
        self.session.commit()
        logger.info(
            f"Created recipe '{recipe.name}' ({len(recipe.ingredients)} ingredients, "
            f"unparsed={recipe.has_unparsed_ingredients})"
        )
        return recipe

    def update(self, recipe: Recipe, data: RecipeCreate | RecipeUpdate) -> Recipe:
        """
        Apply new data to a stored recipe, keeping its id.

        A RecipeCreate replaces every field; a RecipeUpdate only the fields sent.
        """
        fields = data.model_dump(exclude_unset=isinstance(data, RecipeUpdate))
        if "name" in fields:
            if fields["name"] is None or not fields["name"].strip():
                raise InvalidInputError("Recipe name must not be empty")
            fields["name"] = fields["name"].strip()

        self._apply(recipe, fields)
        self.session.commit()
        logger.info(f"Updated recipe '{recipe.name}' ({recipe.id})")
        return recipe

    def delete(self, recipe: Recipe) -> None:
        self.session.delete(recipe)
        self.session.commit()
        logger.info(f"Deleted recipe '{recipe.name}' ({recipe.id})")

    def rollback(self) -> None:
        self.session.rollback()

    def _check_index(self, recipe: Recipe, index: int) -> None:
        if index < 0 or index >= len(recipe.ingredients or []):
            raise InvalidInputError(f"No ingredient at index {index}")

    def update_ingredient(
        self,
        recipe: Recipe,
        index: int,
        edit: IngredientEdit,
    ) -> Recipe:
        """Apply a manual fix to one ingredient. The result is marked parsed."""
        self._check_index(recipe, index)

        current = RecipeIngredient.model_validate(recipe.ingredients[index])
        changes = edit.model_dump(exclude_unset=True)
        if "name" in changes and not (changes["name"] or "").strip():
            raise InvalidInputError("Ingredient name must not be empty")
        if changes.get("modifiers") is None:
            changes.pop("modifiers", None)

        merged = current.model_copy(
            update={
                **changes,
                "raw_line": current.raw_line or current.original_text,
                "parsed": True,
            }
        )

        ingredients = list(recipe.ingredients)
        ingredients[index] = merged.model_dump()
        self._apply(recipe, {"ingredients": ingredients})
        self.session.commit()
        return recipe

    def split_ingredient(
        self,
        recipe: Recipe,
        index: int,
        new_ingredients: list[IngredientEdit],
    ) -> Recipe:
        """
        Replace one ingredient with several ("salt and pepper" -> salt, pepper).

        Every new entry carries the original raw line and stays unparsed
        unless the caller marked it parsed explicitly.
        """
        self._check_index(recipe, index)
        if not new_ingredients:
            raise InvalidInputError("At least one new ingredient is required")

        original = RecipeIngredient.model_validate(recipe.ingredients[index])
        raw_line = original.raw_line or original.original_text

        prepared: list[dict[str, Any]] = []
        for edit in new_ingredients:
            if not (edit.name or "").strip():
                raise InvalidInputError("Split ingredients need a name")
            fields = edit.model_dump(exclude_none=True)
            fields.update(
                original_text=edit.original_text or original.original_text,
                raw_line=raw_line,
                parsed=edit.parsed if edit.parsed is not None else False,
            )
            prepared.append(RecipeIngredient.model_validate(fields).model_dump())

        ingredients = [*recipe.ingredients[:index], *prepared, *recipe.ingredients[index + 1 :]]
        self._apply(recipe, {"ingredients": ingredients})
        self.session.commit()
        logger.info(f"Split ingredient {index} of '{recipe.name}' into {len(prepared)} entries")
        return recipe

    def fix_unparsed_flags(self, owner_id: str | None = None) -> tuple[int, int]:
        """
        Recompute has_unparsed_ingredients for every recipe (optionally one owner's).

        Idempotent. Returns (fixed, total).
        """
        query = select(Recipe)
        if owner_id is not None:
            query = query.where(Recipe.owner_id == owner_id)
        recipes = self.session.scalars(query).all()

        fixed = 0
        for recipe in recipes:
            actual = has_unparsed_ingredients(recipe.ingredients or [])
            if recipe.has_unparsed_ingredients != actual:
                recipe.has_unparsed_ingredients = actual
                fixed += 1
                logger.info(f"Fixed recipe '{recipe.name}': has_unparsed_ingredients={actual}")

        if fixed:
            self.session.commit()
        return fixed, len(recipes)
