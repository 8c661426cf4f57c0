#!/usr/bin/env python3
"""Delete revoked-token rows whose tokens have already expired.

An expired token fails signature/expiry validation on its own, so its
revocation row no longer protects anything. Schedule this as a daily cron job.

Usage:
    python -m scripts.prune_revoked_tokens
"""

import asyncio
from datetime import datetime, timezone
import os
import sys

# Ensure imports work when executed as a script/module
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv  # noqa: E402

from wareland.stores.postgres import close_db, init_db  # noqa: E402
from wareland.stores.revoked_tokens import SqlRevokedTokenStore  # noqa: E402

load_dotenv()


async def main() -> None:
    await init_db()
    try:
        removed = await SqlRevokedTokenStore().prune_expired(datetime.now(timezone.utc))
        print(f"Pruned {removed} expired revoked token(s)")
    finally:
        await close_db()


if __name__ == "__main__":
    asyncio.run(main())
