"""Shopping list persistence on top of the aggregation engine."""

from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from recipeshelf.exceptions import InvalidInputError, NotFoundError
from recipeshelf.logging_config import get_logger
from recipeshelf.models import Recipe, ShoppingList, ShoppingListItem
from recipeshelf.plan.shopping_list import ShoppingItem, ShoppingListGenerator

logger = get_logger(__name__)

EDITABLE_ITEM_FIELDS = {"name", "quantity", "unit", "note", "is_checked", "position"}


def item_from_record(record: ShoppingListItem) -> ShoppingItem:
    return ShoppingItem(
        id=record.id,
        name=record.name,
        quantity=record.quantity,
        unit=record.unit,
        note=record.note,
        is_checked=record.is_checked,
        position=record.position,
        known_ingredient_id=record.known_ingredient_id,
    )


def record_from_item(item: ShoppingItem) -> ShoppingListItem:
    return ShoppingListItem(
        name=item.name,
        quantity=item.quantity,
        unit=item.unit,
        note=item.note,
        is_checked=item.is_checked,
        position=item.position,
        known_ingredient_id=item.known_ingredient_id,
    )


class ShoppingListService:
    """
    Create and edit shopping lists.

    Appending recipes reads the list's items once, merges in memory and
    writes back; two concurrent appends to one list can lose an update.
    """

    def __init__(self, session: Session, generator: ShoppingListGenerator | None = None):
        self.session = session
        self.generator = generator or ShoppingListGenerator()

    # =========================================================================
    # Lists
    # =========================================================================

    def _fetch_recipes(self, owner_id: str, recipe_ids: list[str]) -> list[Recipe]:
        if not recipe_ids:
            return []
        recipes = self.session.scalars(
            select(Recipe).where(Recipe.id.in_(recipe_ids), Recipe.owner_id == owner_id)
        ).all()
        # Keep the caller's order so item positions are predictable
        by_id = {r.id: r for r in recipes}
        return [by_id[rid] for rid in dict.fromkeys(recipe_ids) if rid in by_id]

    def create_list(
        self,
        owner_id: str,
        name: str,
        recipe_ids: list[str] | None = None,
    ) -> ShoppingList:
        """Create a list with items aggregated from the given recipes."""
        if not name or not name.strip():
            raise InvalidInputError("Shopping list name must not be empty")

        recipes = self._fetch_recipes(owner_id, recipe_ids or [])
        items = self.generator.aggregate_for_new_list(r.ingredients for r in recipes)

        shopping_list = ShoppingList(owner_id=owner_id, name=name.strip())
        shopping_list.recipes = list(recipes)
        shopping_list.items = [record_from_item(item) for item in items]
        self.session.add(shopping_list)
        self.session.commit()

        logger.info(
            f"Created shopping list '{shopping_list.name}' with {len(items)} items "
            f"from {len(recipes)} recipes"
        )
        return shopping_list

    def get_list(self, owner_id: str, list_id: str) -> ShoppingList:
        shopping_list = self.session.scalars(
            select(ShoppingList)
            .options(selectinload(ShoppingList.items), selectinload(ShoppingList.recipes))
            .where(ShoppingList.id == list_id)
        ).first()
        if shopping_list is None or shopping_list.owner_id != owner_id:
            raise NotFoundError("Shopping list", list_id)
        return shopping_list

    def list_lists(self, owner_id: str) -> list[ShoppingList]:
        return list(
            self.session.scalars(
                select(ShoppingList)
                .options(selectinload(ShoppingList.items))
                .where(ShoppingList.owner_id == owner_id)
                .order_by(ShoppingList.created_at.desc())
            ).all()
        )

    def add_recipes(self, owner_id: str, list_id: str, recipe_ids: list[str]) -> ShoppingList:
        """
        Append recipes to a list.

        Recipes already on the list are skipped. Matching lines absorb the new
        quantities and are unchecked; other lines go after the last position.
        """
        shopping_list = self.get_list(owner_id, list_id)
        recipes = self._fetch_recipes(owner_id, recipe_ids)
        if not recipes:
            raise NotFoundError("Recipes", ", ".join(recipe_ids) or "[]")

        on_list = {r.id for r in shopping_list.recipes}
        to_add = [r for r in recipes if r.id not in on_list]
        if not to_add:
            logger.info(f"All recipes already on shopping list {list_id}")
            return shopping_list

        records = {record.id: record for record in shopping_list.items}
        result = self.generator.aggregate_for_append(
            [item_from_record(record) for record in shopping_list.items],
            (r.ingredients for r in to_add),
        )

        for item in result.updated_items:
            record = records[item.id]
            record.quantity = item.quantity
            record.note = item.note
            record.is_checked = item.is_checked
        for item in result.new_items:
            shopping_list.items.append(record_from_item(item))
        shopping_list.recipes.extend(to_add)

        self.session.commit()
        logger.info(
            f"Added {len(to_add)} recipes to shopping list {list_id}: "
            f"{len(result.updated_items)} merged, {len(result.new_items)} new"
        )
        return self.get_list(owner_id, list_id)

    def toggle_complete(self, owner_id: str, list_id: str) -> ShoppingList:
        shopping_list = self.get_list(owner_id, list_id)
        shopping_list.is_complete = not shopping_list.is_complete
        self.session.commit()
        return shopping_list

    def delete_list(self, owner_id: str, list_id: str) -> None:
        shopping_list = self.get_list(owner_id, list_id)
        self.session.delete(shopping_list)
        self.session.commit()
        logger.info(f"Deleted shopping list {list_id}")

    # =========================================================================
    # Items
    # =========================================================================

    def _get_item(self, shopping_list: ShoppingList, item_id: int) -> ShoppingListItem:
        for item in shopping_list.items:
            if item.id == item_id:
                return item
        raise NotFoundError("Shopping list item", item_id)

    def add_item(
        self,
        owner_id: str,
        list_id: str,
        name: str,
        quantity: float | None = None,
        unit: str | None = None,
        note: str | None = None,
    ) -> ShoppingListItem:
        """Add a manual item after the current last position."""
        if not name or not name.strip():
            raise InvalidInputError("Item name must not be empty")

        shopping_list = self.get_list(owner_id, list_id)
        position = max((i.position for i in shopping_list.items), default=-1) + 1
        item = ShoppingListItem(
            name=name.strip(),
            quantity=quantity,
            unit=unit,
            note=note,
            position=position,
            is_checked=False,
        )
        shopping_list.items.append(item)
        self.session.commit()
        return item

    def update_item(
        self,
        owner_id: str,
        list_id: str,
        item_id: int,
        changes: dict[str, Any],
    ) -> ShoppingListItem:
        shopping_list = self.get_list(owner_id, list_id)
        item = self._get_item(shopping_list, item_id)

        unknown = set(changes) - EDITABLE_ITEM_FIELDS
        if unknown:
            raise InvalidInputError(f"Cannot update item fields: {', '.join(sorted(unknown))}")
        if "name" in changes and not (changes["name"] or "").strip():
            raise InvalidInputError("Item name must not be empty")

        for key, value in changes.items():
            setattr(item, key, value)
        self.session.commit()
        return item

    def toggle_item(self, owner_id: str, list_id: str, item_id: int) -> ShoppingListItem:
        shopping_list = self.get_list(owner_id, list_id)
        item = self._get_item(shopping_list, item_id)
        item.is_checked = not item.is_checked
        self.session.commit()
        return item

    def remove_item(self, owner_id: str, list_id: str, item_id: int) -> None:
        shopping_list = self.get_list(owner_id, list_id)
        item = self._get_item(shopping_list, item_id)
        shopping_list.items.remove(item)
        self.session.commit()

    def clear_checked(self, owner_id: str, list_id: str) -> ShoppingList:
        """Delete every checked item from the list."""
        shopping_list = self.get_list(owner_id, list_id)
        checked = [item for item in shopping_list.items if item.is_checked]
        for item in checked:
            shopping_list.items.remove(item)
        self.session.commit()
        logger.info(f"Cleared {len(checked)} checked items from shopping list {list_id}")
        return shopping_list
