"""Check that gopherize.me answers before deploying the webhook."""

from __future__ import annotations

import asyncio
import logging
import sys

from gopherbot.integrations import run_all_checks
from gopherbot.monitoring.logging import configure_logging

logger = logging.getLogger("check_integrations")


def main() -> int:
    configure_logging()
    results = asyncio.run(run_all_checks())
    for result in results:
        if result.success:
            logger.info("%s OK: %s", result.name, result.message)
        else:
            logger.error("%s FAILED: %s", result.name, result.message)
    return 0 if all(result.success for result in results) else 1


if __name__ == "__main__":
    sys.exit(main())
