"""Command-line entry point: mount the view, click once, print the result.

Configuration comes from ``FETCHVIEW_*`` environment variables; flags
override them.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from fetchview._transport import AiohttpClient
from fetchview.config import FetchViewConfig
from fetchview.exceptions import FetchViewConfigError
from fetchview.orchestrator import FetchOrchestrator
from fetchview.state.store import Store
from fetchview.view import View, ViewStatus


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="fetchview", description="Fetch the data endpoint once and render it.")
    parser.add_argument("--base-url", default=None, help="Service base URL (env FETCHVIEW_BASE_URL)")
    parser.add_argument("--endpoint", default=None, help="Resource path (env FETCHVIEW_ENDPOINT)")
    parser.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="-v for INFO, -vv for DEBUG")
    return parser.parse_args(argv)


async def _run(config: FetchViewConfig) -> ViewStatus:
    store = Store()
    async with AiohttpClient(config) as client:
        orchestrator = FetchOrchestrator(store, client)
        view = View(store, orchestrator)
        print(view.current.to_text())
        print()
        view.click()
        print(view.current.to_text())
        print()
        await orchestrator.wait_idle()
        print(view.current.to_text())
        view.close()
        return view.current.status


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        config = FetchViewConfig.from_env(
            base_url=args.base_url,
            endpoint=args.endpoint,
            timeout=args.timeout,
        )
    except FetchViewConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    status = asyncio.run(_run(config))
    return 1 if status == ViewStatus.ERROR else 0


if __name__ == "__main__":
    sys.exit(main())
