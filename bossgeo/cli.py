"""CLI interface for the BOSS Geo client.

Runs a single PlaceFinder or PlaceSpotter query and prints the result as JSON.
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from .client import BossGeoClient
from .config import ConfigManager
from .exceptions import BossGeoError
from .logging_utils import initLogging

logger = logging.getLogger(__name__)


def parseParams(rawParams: List[str]) -> Dict[str, str]:
    """Parse ``key=value`` strings into params dict.

    Raises:
        ValueError: If an item has no ``=``
    """
    params: Dict[str, str] = {}
    for item in rawParams:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise ValueError(f"Invalid parameter '{item}', expected key=value")
        params[key] = value
    return params


def buildParser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bossgeo",
        description="Query Yahoo! BOSS Geo PlaceFinder and PlaceSpotter APIs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s placefinder -p location="701 First Ave, Sunnyvale, CA"
  %(prog)s -c config.toml placespotter -p documentContent="Lunch in Paris" -p documentType=text/plain
        """,
    )
    parser.add_argument("--config", "-c", default=None, help="Path to TOML configuration file")
    parser.add_argument("--env-file", default=".env", help="Path to .env file (default: .env)")
    parser.add_argument("--consumer-key", help="OAuth consumer key (overrides configuration)")
    parser.add_argument("--consumer-secret", help="OAuth consumer secret (overrides configuration)")
    parser.add_argument(
        "endpoint",
        choices=["placefinder", "placespotter"],
        help="API endpoint to query",
    )
    parser.add_argument(
        "--param",
        "-p",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Query parameter, may be repeated",
    )
    return parser


async def runQuery(client: BossGeoClient, endpoint: str, params: Dict[str, Any]) -> Any:
    if endpoint == "placefinder":
        return await client.placefinder(params)
    return await client.placespotter(params)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = buildParser()
    args = parser.parse_args(argv)

    try:
        params = parseParams(args.param)
    except ValueError as e:
        parser.error(str(e))

    try:
        configManager = ConfigManager(args.config, dotEnvFile=args.env_file)
        initLogging(configManager.getLoggingConfig())

        clientConfig = dict(configManager.getBossGeoConfig())
        if args.consumer_key:
            clientConfig["consumer-key"] = args.consumer_key
        if args.consumer_secret:
            clientConfig["consumer-secret"] = args.consumer_secret

        client = BossGeoClient.fromConfig(clientConfig)
        logger.debug(f"Running {args.endpoint} query with params: {params}")
        result = asyncio.run(runQuery(client, args.endpoint, params))
    except BossGeoError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
