"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import NullPool

from recipeshelf.database import Base, get_db, get_sync_db
from recipeshelf.kb.knowledge_base import KnowledgeBase
from recipeshelf.kb.seeding import build_seed_knowledge_base, seed_knowledge_base
from recipeshelf.parsing.rules import RulesIngredientParser

# =============================================================================
# Knowledge Base Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def knowledge_base() -> KnowledgeBase:
    """Snapshot built from the seed tables, shared by every test."""
    return build_seed_knowledge_base()


@pytest.fixture
def rules_parser(knowledge_base) -> RulesIngredientParser:
    return RulesIngredientParser(knowledge_base)


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture
def db_path(tmp_path):
    """SQLite file shared by the sync and async engines of one test."""
    return tmp_path / "recipeshelf.db"


@pytest.fixture
def db_engine(db_path):
    """Sync SQLite engine with a fresh schema per test."""
    engine = create_engine(f"sqlite:///{db_path}", connect_args={"check_same_thread": False})
    Base.metadata.create_all(engine)

    yield engine

    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(db_engine) -> sessionmaker[Session]:
    return sessionmaker(db_engine, expire_on_commit=False)


@pytest.fixture
def db_session(session_factory):
    """Create a test database session."""
    with session_factory() as session:
        yield session


@pytest.fixture
def seeded_session(db_session):
    """Session over a database holding the seeded knowledge base."""
    seed_knowledge_base(db_session)
    return db_session


@pytest.fixture
def async_session_factory(db_engine, db_path) -> async_sessionmaker[AsyncSession]:
    """Async sessions over the same file. Connections are not pooled across event loops."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{db_path}", poolclass=NullPool)
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


# =============================================================================
# API Fixtures
# =============================================================================


@pytest.fixture
def client(session_factory, async_session_factory, seeded_session):
    """TestClient whose requests use the seeded test database."""
    from recipeshelf.main import app

    async def override_get_db():
        async with async_session_factory() as session:
            yield session

    def override_get_sync_db():
        with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_sync_db] = override_get_sync_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def owner_headers() -> dict[str, str]:
    return {"X-User-Id": "user-1"}


# =============================================================================
# Sample Data Fixtures
# =============================================================================


@pytest.fixture
def mealie_recipe() -> dict:
    """A recipe in Mealie export format."""
    return {
        "name": "Weeknight Chili",
        "description": "Quick beef chili",
        "recipeYield": "4 servings",
        "prepTime": "15 minutes",
        "cookTime": "40 minutes",
        "orgURL": "https://example.com/chili",
        "recipeCategory": [{"name": "Dinner"}],
        "tags": [{"name": "Beef"}, "Spicy"],
        "recipeIngredient": [
            {"originalText": "1 lb ground beef", "title": "Chili"},
            {"display": "1 onion, diced"},
            {"note": "2 cloves garlic, minced"},
            "--- Toppings ---",
            "1 cup shredded cheddar cheese",
        ],
        "recipeInstructions": [
            {"text": "Brown the beef.", "title": "Cook"},
            {"text": "   "},
            "Add onion and garlic. ",
        ],
    }
