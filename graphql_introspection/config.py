"""
Endpoint configuration

The endpoint comes from `-e/--endpoint`, a positional URL, or `GRAPHQL_ENDPOINT`,
in that order. It is resolved once at startup.
"""

import argparse
import os
from dataclasses import dataclass
from typing import List, Optional
from urllib.parse import urlparse

ENDPOINT_ENV_VAR = "GRAPHQL_ENDPOINT"


class ConfigurationError(ValueError):
    """No usable GraphQL endpoint could be resolved."""


@dataclass(frozen=True)
class ServerConfig:
    endpoint: str


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mcp-graphql-introspection",
        description="MCP server exposing GraphQL schema introspection tools",
    )
    parser.add_argument("url", nargs="?", help="GraphQL endpoint URL")
    parser.add_argument("-e", "--endpoint", help="GraphQL endpoint URL (takes precedence over the positional URL)")
    return parser


def is_absolute_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def resolve_config(argv: Optional[List[str]] = None) -> ServerConfig:
    """
    Resolve the GraphQL endpoint from command line arguments and environment.

    Args:
        argv: Arguments without the program name; defaults to sys.argv[1:]

    Returns:
        ServerConfig with an absolute http(s) endpoint

    Raises:
        ConfigurationError: If no valid endpoint is given
    """
    args, _ = _build_parser().parse_known_args(argv)

    endpoint = args.endpoint
    if not endpoint and args.url and args.url.startswith("http"):
        endpoint = args.url
    if not endpoint:
        endpoint = os.getenv(ENDPOINT_ENV_VAR)

    if not endpoint or not is_absolute_url(endpoint):
        raise ConfigurationError(
            "No valid GraphQL endpoint provided. Please use --endpoint flag "
            "or provide a URL as the first argument."
        )
    return ServerConfig(endpoint=endpoint)
