"""Celery tasks for background job processing."""

from recipeshelf.tasks.imports import (
    fix_unparsed_flags_task,
    import_recipes_task,
    seed_knowledge_base_task,
)

__all__ = [
    "fix_unparsed_flags_task",
    "import_recipes_task",
    "seed_knowledge_base_task",
]
