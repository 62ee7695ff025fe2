"""Command-line entry point: ``naver-search-mcp`` / ``python -m naver_search_mcp``.

Startup order:
    1. Load config from the environment (and .env)
    2. Refuse to start without credentials (exit status 1)
    3. Import tools and check the registry against the handler map
    4. Build the Naver client and Dispatcher, then serve
"""

import logging
import sys

from .config import Config
from .dispatcher import Dispatcher
from .mcp_server import McpServer
from .naver_client import NaverSearchClient
from .primitives import load_all_tools

logger = logging.getLogger("naver_search_mcp")


def _setup_logging(level: str) -> None:
    # stdout carries the stdio transport, so logs go to stderr
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    try:
        config = Config.from_env()
    except ValueError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    valid, error = config.is_valid_for_mode()
    if not valid:
        print(f"Error: {error}", file=sys.stderr)
        sys.exit(1)

    _setup_logging(config.log_level)
    logger.debug("Loaded config: %s", config.to_dict())

    try:
        tools = load_all_tools()
        client = NaverSearchClient(
            config.credentials(),
            base_url=config.api_base_url,
            timeout=config.api_timeout,
        )
        server = McpServer(Dispatcher(client), config, tools)
        logger.info("Registered %d tools (%s transport)", len(tools), config.transport)
        server.run()
    except KeyboardInterrupt:
        pass
    except Exception:
        logger.exception("Fatal error running server")
        sys.exit(1)


if __name__ == "__main__":
    main()
