"""SQLAlchemy database models."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Table,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from recipeshelf.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _new_id() -> str:
    return str(uuid.uuid4())


# =============================================================================
# Knowledge Base
# =============================================================================


class KnownIngredientRecord(Base):
    """Canonical ingredient with its aliases."""

    __tablename__ = "known_ingredients"

    # Autoincrement ids keep id order equal to insertion order for matching
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    category: Mapped[str] = mapped_column(String(50), default="other", nullable=False)
    aliases: Mapped[list] = mapped_column(JSON, default=list, nullable=False)
    default_unit: Mapped[str | None] = mapped_column(String(50), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=_utcnow, onupdate=_utcnow)

    __table_args__ = (Index("idx_known_ingredients_name", "name"),)


class KnownUnitRecord(Base):
    """Canonical measurement unit."""

    __tablename__ = "known_units"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    abbreviation: Mapped[str | None] = mapped_column(String(20), nullable=True)
    aliases: Mapped[list] = mapped_column(JSON, default=list, nullable=False)
    type: Mapped[str] = mapped_column(String(20), default="other")  # volume, weight, count, length
    base_unit: Mapped[str | None] = mapped_column(String(20), nullable=True)
    conversion_to_base: Mapped[float | None] = mapped_column(Float, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=_utcnow)

    __table_args__ = (Index("idx_known_units_name", "name"),)


class KnownModifierRecord(Base):
    """Canonical preparation/state modifier."""

    __tablename__ = "known_modifiers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    type: Mapped[str] = mapped_column(String(20), default="other")  # preparation, state, ...
    aliases: Mapped[list] = mapped_column(JSON, default=list, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=_utcnow)

    __table_args__ = (Index("idx_known_modifiers_name", "name"),)


# =============================================================================
# Recipes
# =============================================================================


class Recipe(Base):
    """Recipe with structured ingredients and instructions."""

    __tablename__ = "recipes"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=_new_id)
    owner_id: Mapped[str] = mapped_column(String, nullable=False)
    name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    servings: Mapped[int | None] = mapped_column(Integer, nullable=True)
    prep_time: Mapped[str | None] = mapped_column(String(50), nullable=True)
    cook_time: Mapped[str | None] = mapped_column(String(50), nullable=True)
    total_time: Mapped[str | None] = mapped_column(String(50), nullable=True)
    source_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str | None] = mapped_column(String(100), nullable=True)
    tags: Mapped[list] = mapped_column(JSON, default=list)
    ingredients: Mapped[list] = mapped_column(JSON, default=list)  # RecipeIngredient dicts
    instructions: Mapped[list] = mapped_column(JSON, default=list)  # Instruction dicts
    has_unparsed_ingredients: Mapped[bool] = mapped_column(Boolean, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=_utcnow, onupdate=_utcnow)

    __table_args__ = (
        Index("idx_recipes_owner_name", "owner_id", "name"),
        Index("idx_recipes_unparsed", "owner_id", "has_unparsed_ingredients"),
    )


# =============================================================================
# Shopping Lists
# =============================================================================

shopping_list_recipes = Table(
    "shopping_list_recipes",
    Base.metadata,
    Column("shopping_list_id", String, ForeignKey("shopping_lists.id"), primary_key=True),
    Column("recipe_id", String, ForeignKey("recipes.id"), primary_key=True),
)


class ShoppingList(Base):
    """Shopping list built from one or more recipes."""

    __tablename__ = "shopping_lists"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=_new_id)
    owner_id: Mapped[str] = mapped_column(String, nullable=False)
    name: Mapped[str] = mapped_column(String, nullable=False)
    is_complete: Mapped[bool] = mapped_column(Boolean, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=_utcnow, onupdate=_utcnow)

    items: Mapped[list["ShoppingListItem"]] = relationship(
        "ShoppingListItem",
        back_populates="shopping_list",
        cascade="all, delete-orphan",
        order_by="ShoppingListItem.position",
    )
    recipes: Mapped[list["Recipe"]] = relationship("Recipe", secondary=shopping_list_recipes)

    __table_args__ = (Index("idx_shopping_lists_owner", "owner_id"),)


class ShoppingListItem(Base):
    """Single line of a shopping list."""

    __tablename__ = "shopping_list_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    shopping_list_id: Mapped[str] = mapped_column(String, ForeignKey("shopping_lists.id"))
    name: Mapped[str] = mapped_column(String, nullable=False)
    quantity: Mapped[float | None] = mapped_column(Float, nullable=True)
    unit: Mapped[str | None] = mapped_column(String(50), nullable=True)
    note: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_checked: Mapped[bool] = mapped_column(Boolean, default=False)
    position: Mapped[int] = mapped_column(Integer, default=0)
    known_ingredient_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("known_ingredients.id"), nullable=True
    )

    shopping_list: Mapped["ShoppingList"] = relationship("ShoppingList", back_populates="items")
