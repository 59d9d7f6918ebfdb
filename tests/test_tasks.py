"""Tests for Celery tasks, run eagerly against the in-memory database."""

import pytest

from recipeshelf.celery_app import celery_app
from recipeshelf.kb.seed_data import INGREDIENT_SEEDS
from recipeshelf.models import Recipe
from recipeshelf.tasks.imports import (
    fix_unparsed_flags_task,
    import_recipes_task,
    seed_knowledge_base_task,
)


@pytest.fixture
def task_sessions(monkeypatch, session_factory):
    """Point the tasks at the test database."""
    monkeypatch.setattr("recipeshelf.tasks.imports.get_session_factory", lambda: session_factory)
    return session_factory


class TestCeleryConfiguration:
    """Tests for the Celery application setup."""

    def test_tasks_registered(self):
        """Test every task is registered under its full name."""
        for name in (
            "recipeshelf.tasks.imports.import_recipes_task",
            "recipeshelf.tasks.imports.fix_unparsed_flags_task",
            "recipeshelf.tasks.imports.seed_knowledge_base_task",
        ):
            assert name in celery_app.tasks

    def test_nightly_flag_repair_scheduled(self):
        """Test the flag repair runs from the beat schedule."""
        entry = celery_app.conf.beat_schedule["nightly-unparsed-flag-repair"]
        assert entry["task"] == "recipeshelf.tasks.imports.fix_unparsed_flags_task"


class TestImportTask:
    """Tests for import_recipes_task."""

    def test_returns_report(self, task_sessions, seeded_session, mealie_recipe):
        """Test the task imports the batch and returns the report as a dict."""
        result = import_recipes_task.apply(
            args=("user-1", [mealie_recipe, {"name": " "}])
        ).get()

        assert result["created"] == 1
        assert result["failed"] == 1
        assert result["created_recipes"][0]["name"] == "Weeknight Chili"
        assert result["parser"] == "rules"


class TestMaintenanceTasks:
    """Tests for the flag repair and seeding tasks."""

    def test_fix_unparsed_flags(self, task_sessions, db_session):
        """Test stale flags are repaired and counted."""
        db_session.add(
            Recipe(
                owner_id="user-1",
                name="Stale",
                ingredients=[{"name": "Onion", "parsed": True}],
                has_unparsed_ingredients=True,
            )
        )
        db_session.commit()

        result = fix_unparsed_flags_task.apply().get()

        assert result == {"status": "completed", "fixed": 1, "total": 1}

    def test_seed_knowledge_base(self, task_sessions):
        """Test seeding through the task reports per collection counts."""
        first = seed_knowledge_base_task.apply().get()
        second = seed_knowledge_base_task.apply().get()

        assert first["status"] == "completed"
        assert first["ingredients"]["inserted"] == len(INGREDIENT_SEEDS)
        assert second["ingredients"]["inserted"] == 0
