#!/usr/bin/env python
"""
Knowledge base seeding script.

Creates the tables if needed, inserts every seed ingredient, unit and
modifier that is not stored yet (by exact canonical name) and grows the
alias lists of the ones that are. Safe to run repeatedly.

Run with: python scripts/seed_knowledge_base.py [--report-conflicts]

Environment Variables:
    DATABASE_URL: Database connection string
    LOG_LEVEL: Log level when --log-level is not given
"""

import argparse
import os
import sys

from recipeshelf.database import Base, get_engine, get_session_factory
from recipeshelf.kb.repository import SqlKnowledgeBaseStore, load_knowledge_base
from recipeshelf.kb.seeding import seed_knowledge_base
from recipeshelf.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed the ingredient knowledge base")
    parser.add_argument(
        "--report-conflicts",
        action="store_true",
        help="List names and aliases claimed by more than one entry after seeding",
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv("LOG_LEVEL", "INFO"),
        help="Log level (default: LOG_LEVEL or INFO)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point for the seed script."""
    args = parse_args(argv)
    configure_logging(log_level=args.log_level)

    logger.info("=" * 60)
    logger.info("Knowledge Base Seeding")
    logger.info("=" * 60)

    try:
        Base.metadata.create_all(get_engine())

        with get_session_factory()() as session:
            report = seed_knowledge_base(session)

            logger.info("Seeding Results:")
            for kind, counts in report.to_dict().items():
                logger.info(
                    f"  {kind}: {counts['inserted']} inserted, "
                    f"{counts['aliases_extended']} aliases extended, "
                    f"{counts['unchanged']} unchanged"
                )

            if args.report_conflicts:
                kb = load_knowledge_base(SqlKnowledgeBaseStore(session))
                logger.info(f"Knowledge base version {kb.version}: {len(kb.conflicts)} conflicts")
                for conflict in kb.conflicts:
                    logger.info(
                        f"  {conflict.kind} '{conflict.term}': {conflict.winner} wins over "
                        f"{', '.join(conflict.shadowed)}"
                    )
        logger.info("=" * 60)
        return 0

    except KeyboardInterrupt:
        logger.info("Seeding interrupted by user")
        return 130
    except Exception as e:
        logger.exception(f"Seeding failed with error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
