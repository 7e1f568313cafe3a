"""Command-line GeoJSON checker.

Reads one or more JSON documents (``-`` for stdin), validates each against
the requested GeoJSON type and reports the outcome through logging.

Exit status:
    0 — every input is valid
    1 — at least one input is invalid
    2 — at least one input could not be read or is not JSON
"""

from __future__ import annotations

import argparse
import json
import logging
import logging.config
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any

from geojson_typed import __version__
from geojson_typed.core.config import ValidatorConfig
from geojson_typed.core.exceptions import ConfigValidationError, GeoJSONValidationError
from geojson_typed.validators import (
    parse_feature,
    parse_feature_collection,
    parse_geojson,
    parse_geometry,
    parse_geometry_collection,
    parse_line_string,
    parse_multi_line_string,
    parse_multi_point,
    parse_multi_polygon,
    parse_point,
    parse_polygon,
)

logger = logging.getLogger("geojson_typed.cli")

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_UNREADABLE = 2

PARSERS = {
    "GeoJSON": parse_geojson,
    "Geometry": parse_geometry,
    "Feature": parse_feature,
    "FeatureCollection": parse_feature_collection,
    "Point": parse_point,
    "MultiPoint": parse_multi_point,
    "LineString": parse_line_string,
    "MultiLineString": parse_multi_line_string,
    "Polygon": parse_polygon,
    "MultiPolygon": parse_multi_polygon,
    "GeometryCollection": parse_geometry_collection,
}


def setup_logging(level: str) -> None:
    """Send log records to stderr with colourised level names."""
    logging.config.dictConfig(_logconfig(level))


def _logconfig(level: str) -> dict[str, Any]:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "simple": {
                "()": "colorlog.ColoredFormatter",
                "format": "%(log_color)s%(levelname)s:%(reset)s %(message)s",
            },
        },
        "handlers": {
            "stderr": {
                "class": "logging.StreamHandler",
                "formatter": "simple",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {"root": {"level": level, "handlers": ["stderr"]}},
    }


def add_parser_args(parser: argparse.ArgumentParser) -> None:
    """Add checker arguments to the argument parser."""
    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"%(prog)s {__version__}",
        help="prints the version of the library and exits",
    )
    parser.add_argument("paths", nargs="+", help="GeoJSON files to check ('-' reads stdin)")
    parser.add_argument(
        "--type",
        dest="geojson_type",
        choices=list(PARSERS),
        default="GeoJSON",
        help="GeoJSON type every input must conform to. Default is any GeoJSON object.",
    )
    parser.add_argument(
        "--allow-nested-collections",
        action="store_true",
        help="Accept GeometryCollections nested inside GeometryCollections.",
    )
    parser.add_argument(
        "--enforce-ring-closure",
        action="store_true",
        help="Require the first and last positions of every linear ring to be equal.",
    )
    parser.add_argument(
        "--reject-non-finite",
        action="store_true",
        help="Reject NaN and infinite coordinates.",
    )
    parser.add_argument(
        "--json",
        dest="as_json",
        action="store_true",
        help="Print one JSON error record per invalid input to stdout.",
    )
    parser.add_argument(
        "-l",
        "--log-level",
        choices=list(logging.getLevelNamesMapping()),
        default="INFO",
        help="Level for logs written to stderr",
    )


def build_config(ns: argparse.Namespace) -> ValidatorConfig:
    """Environment configuration with command-line flags applied on top."""
    config = ValidatorConfig.from_env()
    overrides = {
        "allow_nested_geometry_collections": ns.allow_nested_collections,
        "enforce_ring_closure": ns.enforce_ring_closure,
        "reject_non_finite_numbers": ns.reject_non_finite,
    }
    return replace(config, **{key: True for key, enabled in overrides.items() if enabled})


def _load(source: str) -> object:
    if source == "-":
        return json.load(sys.stdin)
    with Path(source).open(encoding="utf-8") as fh:
        return json.load(fh)


def check_source(source: str, geojson_type: str, config: ValidatorConfig, *, as_json: bool) -> int:
    """Validate a single input and return its exit status."""
    try:
        data = _load(source)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, RecursionError) as exc:
        logger.error("%s: cannot read JSON: %s", source, exc)
        return EXIT_UNREADABLE

    try:
        value = PARSERS[geojson_type](data, config=config)
    except GeoJSONValidationError as exc:
        logger.error("%s: not a valid %s: %s", source, geojson_type, exc)
        if as_json:
            print(json.dumps({"source": source, **exc.to_error_dict()}))
        return EXIT_INVALID

    logger.info("%s: valid %s", source, value.type)
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="geojson-typed",
        description="Validate GeoJSON documents against RFC 7946.",
    )
    add_parser_args(parser)
    ns = parser.parse_args(argv)
    setup_logging(ns.log_level)

    try:
        config = build_config(ns)
    except ConfigValidationError as exc:
        logger.error("%s", exc)
        return EXIT_UNREADABLE

    statuses = [
        check_source(source, ns.geojson_type, config, as_json=ns.as_json) for source in ns.paths
    ]
    return max(statuses, default=EXIT_OK)
