import argparse
import logging
import os
import sys

import uvicorn
from dotenv import load_dotenv

from pastebin.api.server import create_app
from pastebin.api.service import ApiSettings
from pastebin.exception_handler import error_handler


logger = logging.getLogger("pastebin")


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Serve the in-memory pastebin snippet API"
    )
    parser.add_argument(
        "--host",
        type=str,
        help="Bind address (default: $HOST or 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        type=int,
        help="Listening port (default: $PORT or 3001)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: $LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--env-file",
        type=str,
        default=".env",
        help="Environment file to load before reading settings (default: .env)",
    )

    args = parser.parse_args()

    if args.env_file and os.path.exists(args.env_file):
        load_dotenv(args.env_file)

    settings = ApiSettings.from_env()
    if args.host:
        settings.host = args.host
    if args.port:
        settings.port = args.port
    if args.log_level:
        settings.log_level = args.log_level

    error_handler.set_level(settings.log_level)
    if not settings.admin_key:
        logger.warning("ADMIN_KEY is not set; /api/admin will reject every request")

    app = create_app(settings)

    try:
        uvicorn.run(
            app,
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower(),
        )
    except KeyboardInterrupt:
        print("\n⚠️ Server interrupted", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
