"""
Quick check that the configured Supabase project answers and exposes the
tables the API reads and writes. Read-only: nothing is inserted.

Run: python scripts/check_store.py
"""

import asyncio
import sys
from pathlib import Path
import os
from dotenv import load_dotenv

sys.path.insert(0, str(Path(__file__).parent.parent))

# Load environment variables
load_dotenv()

from app.core.exceptions import StoreOperationError
from app.db.supabase import create_client, execute_query
from utils.constants import USERS_TABLE, STORAGE_LOCATIONS_TABLE, BOOKINGS_TABLE
import logging

logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
logger = logging.getLogger(__name__)

SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_ANON_KEY = os.getenv("SUPABASE_ANON_KEY")

if not SUPABASE_URL or not SUPABASE_ANON_KEY:
    raise ValueError("SUPABASE_URL and SUPABASE_ANON_KEY must be set in .env file")


async def check_store() -> bool:
    client = create_client(SUPABASE_URL, SUPABASE_ANON_KEY, timeout=10.0)
    healthy = True

    try:
        logger.info(f"Connecting to {SUPABASE_URL}")

        for table in (USERS_TABLE, STORAGE_LOCATIONS_TABLE, BOOKINGS_TABLE):
            try:
                response = await execute_query(client.table(table).select("id").limit(1), table)
            except StoreOperationError as e:
                healthy = False
                logger.error(f"  {table}: {e.message}")
                continue
            logger.info(f"  {table}: reachable ({len(response.data or [])} row sampled)")

        if healthy:
            locations = await execute_query(
                client.table(STORAGE_LOCATIONS_TABLE).select("id"),
                STORAGE_LOCATIONS_TABLE,
            )
            if not locations.data:
                logger.warning("storage_locations is empty; POST /book will fail with 'No locations available'")

    finally:
        await client.aclose()

    return healthy


if __name__ == "__main__":
    ok = asyncio.run(check_store())
    sys.exit(0 if ok else 1)
