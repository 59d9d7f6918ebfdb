"""Exceptions raised by the recipeshelf services."""


class RecipeShelfError(Exception):
    """Base exception for recipeshelf errors."""


class NotFoundError(RecipeShelfError):
    """Raised when a requested entity does not exist or is not visible to the caller."""

    def __init__(self, entity: str, identifier: object):
        super().__init__(f"{entity} {identifier} not found")
        self.entity = entity
        self.identifier = identifier


class InvalidInputError(RecipeShelfError):
    """Raised when caller input cannot be applied."""
