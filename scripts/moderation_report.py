#!/usr/bin/env python3
"""Print comment moderation counts for the configured API.

Usage:
    scripts/moderation_report.py [EVENT_ID]
"""

import asyncio
import sys

import logfire

from hub.application.store import CommentStore, ModerationView
from hub.config import Settings
from hub.domain.value import ModerationFilter
from hub.util.di.container import create_container
from hub.util.logging import setup_logging
from hub.util.observability import configure_logfire, instrument_httpx


async def report(event_id: str | None) -> int:
    container = create_container()
    try:
        store = await container.get(CommentStore)
        params = {"event_id": event_id} if event_id else {}
        await store.fetch_comments(**params)
        if store.error:
            print(f"Failed to load comments: {store.error}", file=sys.stderr)
            return 1

        view = ModerationView(store)
        for selector in ModerationFilter:
            print(f"{selector.value:>8}: {view.counts.for_filter(selector)}")
        return 0
    finally:
        await container.close()


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)
    instrument_httpx()

    event_id = sys.argv[1] if len(sys.argv) > 1 else None
    try:
        return asyncio.run(report(event_id))
    except Exception as e:
        logfire.error(
            "Moderation report failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
