"""Backfill posts whose userId (or comment userId) was saved as a string.

Usage: python scripts/fix_user_ids.py
"""
import asyncio
import os
import sys

# Add project root to sys.path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from entrelinhas.core.config import settings
from entrelinhas.db.client import create_client
from entrelinhas.services.maintenance_service import fix_user_ids


async def main():
    client = create_client()
    try:
        await fix_user_ids(client[settings.MONGO_DB_NAME])
    finally:
        client.close()


if __name__ == "__main__":
    asyncio.run(main())
