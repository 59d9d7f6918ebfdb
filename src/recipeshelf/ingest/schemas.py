"""Pydantic schemas for recipe import batches and their reports."""

import re
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

_FIRST_INT = re.compile(r"\d+")


def _name_of(value: Any) -> str | None:
    """Mealie sends tags and categories as strings or as {"name": ...} objects."""
    if isinstance(value, dict):
        value = value.get("name")
    if value is None:
        return None
    text = str(value).strip()
    return text or None


# =============================================================================
# Import input
# =============================================================================


class ImportedIngredient(BaseModel):
    """One ingredient of an imported recipe: a plain string or a Mealie object."""

    model_config = ConfigDict(extra="ignore")

    original_text: str | None = Field(
        None, validation_alias=AliasChoices("original_text", "originalText")
    )
    display: str | None = None
    note: str | None = None
    section: str | None = Field(None, validation_alias=AliasChoices("section", "title"))

    @model_validator(mode="before")
    @classmethod
    def coerce_string(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"original_text": data}
        return data

    @property
    def text(self) -> str:
        """Line to parse: original text, else display text, else the note."""
        for candidate in (self.original_text, self.display, self.note):
            if candidate and candidate.strip():
                return candidate.strip()
        return ""


class ImportedInstruction(BaseModel):
    """One instruction step: a plain string or an object with text and title."""

    model_config = ConfigDict(extra="ignore")

    text: str = ""
    title: str | None = None

    @model_validator(mode="before")
    @classmethod
    def coerce_string(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"text": data}
        return data

    @field_validator("text", mode="before")
    @classmethod
    def default_text(cls, v: Any) -> str:
        return "" if v is None else str(v)


class ImportedRecipe(BaseModel):
    """Recipe from an external source, accepting Mealie export field names."""

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    description: str | None = None
    servings: int | None = Field(
        None, validation_alias=AliasChoices("servings", "recipeYield", "recipe_yield")
    )
    prep_time: str | None = Field(None, validation_alias=AliasChoices("prep_time", "prepTime"))
    cook_time: str | None = Field(None, validation_alias=AliasChoices("cook_time", "cookTime"))
    total_time: str | None = Field(
        None, validation_alias=AliasChoices("total_time", "totalTime")
    )
    source_url: str | None = Field(
        None, validation_alias=AliasChoices("source_url", "sourceUrl", "orgURL", "org_url")
    )
    category: str | None = Field(
        None, validation_alias=AliasChoices("category", "recipeCategory", "recipe_category")
    )
    tags: list[str] = Field(default_factory=list)
    ingredients: list[ImportedIngredient] = Field(
        default_factory=list,
        validation_alias=AliasChoices("ingredients", "recipeIngredient", "recipe_ingredient"),
    )
    instructions: list[ImportedInstruction] = Field(
        default_factory=list,
        validation_alias=AliasChoices(
            "instructions", "recipeInstructions", "recipe_instructions"
        ),
    )

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v: Any) -> str:
        if v is None:
            return ""
        return str(v).strip()

    @field_validator("servings", mode="before")
    @classmethod
    def coerce_servings(cls, v: Any) -> int | None:
        """Accept 4, "4" and "4 servings"; anything without a number is dropped."""
        if v is None or isinstance(v, bool):
            return None
        if isinstance(v, (int, float)):
            return int(v)
        match = _FIRST_INT.search(str(v))
        return int(match.group(0)) if match else None

    @field_validator("prep_time", "cook_time", "total_time", mode="before")
    @classmethod
    def coerce_time(cls, v: Any) -> str | None:
        if v is None or v == "":
            return None
        return str(v).strip()

    @field_validator("category", mode="before")
    @classmethod
    def coerce_category(cls, v: Any) -> str | None:
        if isinstance(v, list):
            names = [_name_of(item) for item in v]
            return next((n for n in names if n), None)
        return _name_of(v)

    @field_validator("tags", mode="before")
    @classmethod
    def coerce_tags(cls, v: Any) -> list[str]:
        if not v:
            return []
        if not isinstance(v, list):
            v = [v]
        return [name for name in (_name_of(item) for item in v) if name]

    @field_validator("ingredients", "instructions", mode="before")
    @classmethod
    def default_list(cls, v: Any) -> Any:
        return v or []


# =============================================================================
# Import report
# =============================================================================


class FailedIngredient(BaseModel):
    """An ingredient line whose ingredient had no knowledge base match."""

    original_text: str
    parsed_ingredient: str
    parsed_quantity: int | float | str | None = None
    parsed_unit: str | None = None
    unit_matched: bool = False
    reason: str
    suggestions: list[str] = Field(default_factory=list)


class RecipeParsingIssues(BaseModel):
    """Unmatched ingredients of one imported recipe, for human follow-up."""

    recipe_name: str
    recipe_id: str | None = None
    failed_ingredients: list[FailedIngredient] = Field(default_factory=list)
    total_ingredients: int = 0


class SkippedRecipe(BaseModel):
    name: str
    reason: str


class ImportFailure(BaseModel):
    name: str
    error: str


class ImportedRecipeSummary(BaseModel):
    id: str
    name: str
    ingredient_count: int
    has_unparsed_ingredients: bool


class ImportReport(BaseModel):
    """Outcome of one import batch."""

    created: int = 0
    updated: int = 0
    skipped: int = 0
    failed: int = 0
    recipes_with_parsing_issues: int = 0

    created_recipes: list[ImportedRecipeSummary] = Field(default_factory=list)
    updated_recipes: list[ImportedRecipeSummary] = Field(default_factory=list)
    skipped_recipes: list[SkippedRecipe] = Field(default_factory=list)
    errors: list[ImportFailure] = Field(default_factory=list)
    parsing_issues: list[RecipeParsingIssues] = Field(default_factory=list)

    parser: str = ""
    kb_version: str = ""

    def refresh_counts(self) -> "ImportReport":
        self.created = len(self.created_recipes)
        self.updated = len(self.updated_recipes)
        self.skipped = len(self.skipped_recipes)
        self.failed = len(self.errors)
        self.recipes_with_parsing_issues = len(self.parsing_issues)
        return self


class PreviewRecipe(BaseModel):
    name: str
    ingredient_count: int
    ingredients: list[str] = Field(default_factory=list)


class ImportPreview(BaseModel):
    """What an import would parse, without parsing or storing anything."""

    total_recipes: int = 0
    total_ingredients: int = 0
    recipes: list[PreviewRecipe] = Field(default_factory=list)
