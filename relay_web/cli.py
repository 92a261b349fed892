import argparse
import logging
import os
import sys
from typing import List, Optional

import uvicorn
from dotenv import load_dotenv
from pydantic import ValidationError

from relay_core import IncidentClient, RelayConfig
from .app import create_app
from .browser import open_in_background

logger = logging.getLogger("relay-web")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="incident-relay",
        description="Serve a local form that creates ServiceNow incidents.",
    )
    parser.add_argument(
        "--hostname",
        default=os.getenv("RELAY_HOSTNAME", ""),
        help="ServiceNow hostname. example: dev12345.service-now.com",
    )
    parser.add_argument("--host", default=os.getenv("RELAY_LISTEN_HOST", "localhost"), help="Local listen address")
    parser.add_argument("--port", type=int, default=os.getenv("RELAY_LISTEN_PORT", "8080"), help="Local listen port")
    parser.add_argument("--no-browser", action="store_true", help="Do not open the form in the default browser")
    return parser


def load_config(argv: Optional[List[str]] = None) -> RelayConfig:
    """Parse flags into a RelayConfig. Exits with status 1 when the hostname is missing."""
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return RelayConfig(
            hostname=args.hostname,
            listen_host=args.host,
            listen_port=args.port,
            open_browser=not args.no_browser,
        )
    except ValidationError:
        print("Hostname must not be empty")
        parser.print_help(sys.stdout)
        sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    config = load_config(argv)
    app = create_app(config, IncidentClient(config))

    if config.open_browser:
        open_in_background(config.local_url)

    logger.info(f"Starting server on {config.listen_host}:{config.listen_port}")
    try:
        uvicorn.run(app, host=config.listen_host, port=config.listen_port)
    except (OSError, SystemExit) as e:
        logger.error(f"Error starting the server: {str(e)}")
        sys.exit(1)


if __name__ == "__main__":
    main()
