"""Celery tasks for recipe import and knowledge base maintenance."""

from typing import Any

from recipeshelf.celery_app import celery_app
from recipeshelf.database import get_session_factory
from recipeshelf.engine import IngredientEngine
from recipeshelf.kb.seeding import seed_knowledge_base
from recipeshelf.logging_config import LoggingContext, configure_logging, get_logger
from recipeshelf.recipes.service import RecipeService

# Configure logging for Celery workers
configure_logging()
logger = get_logger(__name__)


@celery_app.task(
    bind=True,
    name="recipeshelf.tasks.imports.import_recipes_task",
    acks_late=True,
    reject_on_worker_lost=True,
)
def import_recipes_task(self, owner_id: str, recipes: list[dict[str, Any]]) -> dict[str, Any]:
    """
    Import a batch of recipes in the background.

    Per-recipe failures are part of the returned report; the task itself only
    fails when the batch cannot start (for example the database is down).

    Args:
        owner_id: Owner of the imported recipes.
        recipes: Raw recipe dicts, Mealie export format accepted.

    Returns:
        The ImportReport as a dict.
    """
    task_id = self.request.id

    with LoggingContext(task_id=task_id):
        logger.info(f"Starting import task {task_id} with {len(recipes)} recipes")
        try:
            with get_session_factory()() as session:
                engine = IngredientEngine.from_session(session)
                try:
                    report = engine.reconcile_import_batch(
                        owner_id, recipes, RecipeService(session)
                    )
                finally:
                    engine.close()
        except Exception as e:
            logger.exception(f"Import task {task_id} failed: {e}")
            raise

        logger.info(
            f"Import task {task_id} finished: {report.created} created, "
            f"{report.updated} updated, {report.failed} failed"
        )
        return report.model_dump()


@celery_app.task(
    bind=True,
    name="recipeshelf.tasks.imports.fix_unparsed_flags_task",
    max_retries=3,
    default_retry_delay=60,
    autoretry_for=(Exception,),
    retry_backoff=True,
    acks_late=True,
)
def fix_unparsed_flags_task(self, owner_id: str | None = None) -> dict[str, Any]:
    """
    Recompute has_unparsed_ingredients for stored recipes.

    Scheduled nightly by Celery Beat; safe to run at any time.
    """
    task_id = self.request.id

    with LoggingContext(task_id=task_id):
        with get_session_factory()() as session:
            fixed, total = RecipeService(session).fix_unparsed_flags(owner_id)

        if fixed:
            logger.warning(f"Flag repair task {task_id} fixed {fixed} of {total} recipes")
        else:
            logger.info(f"Flag repair task {task_id}: all {total} recipes consistent")
        return {"status": "completed", "fixed": fixed, "total": total}


@celery_app.task(
    bind=True,
    name="recipeshelf.tasks.imports.seed_knowledge_base_task",
    max_retries=3,
    default_retry_delay=60,
    autoretry_for=(Exception,),
    retry_backoff=True,
    acks_late=True,
)
def seed_knowledge_base_task(self) -> dict[str, Any]:
    """Insert missing seed entries and grow aliases of existing ones."""
    task_id = self.request.id

    with LoggingContext(task_id=task_id):
        with get_session_factory()() as session:
            report = seed_knowledge_base(session)

        logger.info(f"Seed task {task_id} finished")
        return {"status": "completed", **report.to_dict()}
