"""
Nominatim command line client with TOML configuration.

Examples:
    ./main.py search "Unter den Linden 1, Berlin" --limit 3
    ./main.py structured --city Berlin --street "Unter den Linden 1"
    ./main.py reverse 52.5170365 13.3888599 --zoom 10
    ./main.py osm W 50637691
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from lib.logging_utils import initLogging
from lib.nominatim import (
    AsyncNominatimClient,
    NominatimClient,
    NominatimError,
    NominatimProperties,
    OsmIdReverseSearchRequest,
    OsmType,
    ReverseSearchRequest,
    SearchRequest,
    SearchResult,
    StructuredSearchRequest,
    loadConfig,
)
from lib.nominatim.models import BaseRequest, BaseSearchRequest

# Configure basic logging first
logging.basicConfig(format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", level=logging.WARNING)
logger = logging.getLogger(__name__)


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Query a Nominatim geocoding service, dood!")
    parser.add_argument(
        "-c",
        "--config",
        default="config.toml",
        help="Path to configuration file (default: config.toml)",
    )
    parser.add_argument("--env-file", default=".env", help="Path to .env file (default: .env)")
    parser.add_argument("--lang", help="Preferred result language, e.g. 'de' or 'en,de'")
    parser.add_argument("--email", help="Contact email sent with the request")
    parser.add_argument("--no-polygon", action="store_true", help="Do not request GeoJSON geometry")
    parser.add_argument("--async", dest="useAsync", action="store_true", help="Use the async client")

    subparsers = parser.add_subparsers(dest="command", required=True)

    search = subparsers.add_parser("search", help="Free-text search")
    search.add_argument("query")
    structured = subparsers.add_parser("structured", help="Structured address search")
    for name in ("street", "city", "county", "state", "country", "postalcode"):
        structured.add_argument(f"--{name}")
    for subparser in (search, structured):
        subparser.add_argument("--limit", type=int, default=10)
        subparser.add_argument("--countrycodes", help="Comma separated ISO 3166-1alpha2 codes")

    reverse = subparsers.add_parser("reverse", help="Reverse search by coordinates")
    reverse.add_argument("lat", type=float)
    reverse.add_argument("lon", type=float)
    osm = subparsers.add_parser("osm", help="Reverse search by OSM object")
    osm.add_argument("osmType", help="N, W or R")
    osm.add_argument("osmId")
    for subparser in (reverse, osm):
        subparser.add_argument("--zoom", type=int, default=18)

    return parser.parse_args(argv)


def buildRequest(args: argparse.Namespace) -> BaseRequest:
    """Create request object for parsed arguments."""
    common: Dict[str, Any] = {"email": args.email, "polygon": not args.no_polygon}
    if args.lang:
        common["acceptLanguage"] = args.lang

    match args.command:
        case "search" | "structured":
            countryCodes = args.countrycodes.split(",") if args.countrycodes else []
            if args.command == "search":
                return SearchRequest(query=args.query, limit=args.limit, countryCodes=countryCodes, **common)
            return StructuredSearchRequest(
                street=args.street,
                city=args.city,
                county=args.county,
                state=args.state,
                country=args.country,
                postalCode=args.postalcode,
                limit=args.limit,
                countryCodes=countryCodes,
                **common,
            )
        case "reverse":
            return ReverseSearchRequest(lat=args.lat, lon=args.lon, zoom=args.zoom, **common)
        case "osm":
            osmType = OsmType.fromValue(args.osmType)
            if osmType is None:
                raise ValueError(f"Unknown OSM type: {args.osmType}")
            return OsmIdReverseSearchRequest(osmType=osmType, osmId=args.osmId, zoom=args.zoom, **common)
        case _:
            raise ValueError(f"Unknown command: {args.command}")


async def runAsync(properties: NominatimProperties, request: BaseRequest) -> List[SearchResult]:
    """Run request with the async client."""
    client = AsyncNominatimClient(properties)
    if isinstance(request, BaseSearchRequest):
        return [result async for result in client.geocode(request)]
    result = await client.reverseGeocode(request)  # type: ignore[arg-type]
    return [result] if result is not None else []


def runSync(properties: NominatimProperties, request: BaseRequest) -> List[SearchResult]:
    """Run request with the blocking client."""
    client = NominatimClient(properties)
    if isinstance(request, BaseSearchRequest):
        return client.geocode(request)
    result = client.reverseGeocode(request)  # type: ignore[arg-type]
    return [result] if result is not None else []


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_arguments(argv)

    config = loadConfig(args.config, args.env_file)
    initLogging(config.get("logging", {}))
    properties = NominatimProperties.fromConfig(config.get("nominatim", {}))

    try:
        request = buildRequest(args)
        if args.useAsync:
            results = asyncio.run(runAsync(properties, request))
        else:
            results = runSync(properties, request)
    except (NominatimError, ValueError) as e:
        logger.error(f"Request failed: {e}")
        return 1

    print(json.dumps([result.to_dict() for result in results], indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
