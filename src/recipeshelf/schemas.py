"""Recipe data schemas shared by the services and the API."""

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator


class RecipeIngredient(BaseModel):
    """One ingredient as stored on a recipe."""

    name: str
    quantity: int | float | str | None = None  # number or verbatim range like "3-4"
    unit: str | None = None
    modifiers: list[str] = Field(default_factory=list)
    note: str | None = None
    original_text: str | None = None
    raw_line: str | None = None  # full source line, kept across edits and splits
    known_ingredient_id: int | None = None
    known_unit_id: int | None = None
    parsed: bool = False
    section: str | None = None

    @model_validator(mode="before")
    @classmethod
    def default_parsed_flag(cls, data: Any) -> Any:
        """Rows written before the parsed flag existed count as parsed when matched."""
        if isinstance(data, dict) and "parsed" not in data:
            data = {**data, "parsed": data.get("known_ingredient_id") is not None}
        return data

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v: Any) -> str:
        if v is None:
            return ""
        return str(v).strip()


class Instruction(BaseModel):
    """A single recipe step."""

    text: str
    title: str | None = None
    position: int = 0


class RecipeBase(BaseModel):
    description: str | None = None
    servings: int | None = Field(None, ge=0)
    prep_time: str | None = None
    cook_time: str | None = None
    total_time: str | None = None
    source_url: str | None = None
    category: str | None = None
    tags: list[str] = Field(default_factory=list)


class RecipeCreate(RecipeBase):
    """Recipe data for create and full replace."""

    name: str
    ingredients: list[RecipeIngredient] = Field(default_factory=list)
    instructions: list[Instruction] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Recipe name must not be empty")
        return v


class RecipeUpdate(RecipeBase):
    """Partial recipe update. Only fields that were sent are applied."""

    name: str | None = None
    ingredients: list[RecipeIngredient] | None = None
    instructions: list[Instruction] | None = None


class IngredientEdit(BaseModel):
    """Manual correction of one ingredient. Only fields that were sent are applied."""

    name: str | None = None
    quantity: int | float | str | None = None
    unit: str | None = None
    modifiers: list[str] | None = None
    note: str | None = None
    original_text: str | None = None
    known_ingredient_id: int | None = None
    known_unit_id: int | None = None
    parsed: bool | None = None
    section: str | None = None
