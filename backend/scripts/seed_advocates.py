#!/usr/bin/env python3
"""Script to create the advocates table and seed sample advocates.

Usage:
    python scripts/seed_advocates.py [--reset]
"""

import asyncio
import logging
import sys
from pathlib import Path

# Add parent directory to path to import the advocates package
sys.path.insert(0, str(Path(__file__).parent.parent))

from advocates import models  # noqa: E402,F401
from advocates.core.logging import setup_logging  # noqa: E402
from advocates.core.seed_advocates import seed_advocates  # noqa: E402
from advocates.db.base import Base  # noqa: E402
from advocates.db.engine import engine  # noqa: E402
from advocates.db.session import SessionLocal  # noqa: E402

logger = logging.getLogger(__name__)


async def main(reset: bool) -> None:
    """Create tables and seed the directory."""
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        result = await seed_advocates(SessionLocal, reset=reset)
        logger.info("Seeded advocates", extra=result)
        print(f"Created {result['created']} advocate(s); {result['skipped']} already present.")
    except Exception as e:
        logger.error(f"Error seeding advocates: {e}", exc_info=True)
        print(f"\n✗ Error seeding advocates: {e}")
        sys.exit(1)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Seed the advocate directory for development")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Delete existing advocates before seeding",
    )

    args = parser.parse_args()
    setup_logging()
    asyncio.run(main(reset=args.reset))
