#!/usr/bin/env python3
"""
GraphQL Introspection MCP Server

Exposes schema summary, query list, mutation list and type details of one
GraphQL endpoint as MCP tools over stdio.

Usage:
    mcp-graphql-introspection --endpoint https://example.com/graphql
    mcp-graphql-introspection https://example.com/graphql
"""

import logging
import os
import sys
from typing import Annotated, List, Optional

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from .base import GraphQLSource
from .config import ConfigurationError, resolve_config
from .tools import (
    GraphQLSchemaInfoTool,
    GraphQLQueriesTool,
    GraphQLMutationsTool,
    GraphQLTypeDetailTool
)

APP_NAME = "graphql-introspection"

logger = logging.getLogger(__name__)


def create_server(graphql_source: GraphQLSource) -> FastMCP:
    """
    Build the MCP server with the four introspection tools registered.

    Tool names and descriptions match the LangChain tools.

    Args:
        graphql_source: Endpoint every tool call introspects

    Returns:
        FastMCP server, not yet running
    """
    mcp = FastMCP(APP_NAME)

    @mcp.tool(name=GraphQLSchemaInfoTool.model_fields["name"].default,
              description=GraphQLSchemaInfoTool.model_fields["description"].default)
    async def introspect_schema() -> str:
        return await graphql_source.schema_summary()

    @mcp.tool(name=GraphQLQueriesTool.model_fields["name"].default,
              description=GraphQLQueriesTool.model_fields["description"].default)
    async def get_graphql_gql_queries() -> str:
        return await graphql_source.list_queries()

    @mcp.tool(name=GraphQLMutationsTool.model_fields["name"].default,
              description=GraphQLMutationsTool.model_fields["description"].default)
    async def get_graphql_gql_mutations() -> str:
        return await graphql_source.list_mutations()

    @mcp.tool(name=GraphQLTypeDetailTool.model_fields["name"].default,
              description=GraphQLTypeDetailTool.model_fields["description"].default)
    async def get_graphql_type_details(
        typeNames: Annotated[List[str], Field(description="Names of the GraphQL types to inspect")],
    ) -> str:
        return await graphql_source.type_details(typeNames)

    return mcp


def main(argv: Optional[List[str]] = None) -> None:
    # stdout carries the MCP protocol
    logging.basicConfig(
        stream=sys.stderr,
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = resolve_config(argv)
    except ConfigurationError as e:
        logger.error("Error: %s", e)
        sys.exit(1)

    mcp = create_server(GraphQLSource(endpoint=config.endpoint))
    logger.info("GraphQL Introspection MCP Server running on stdio")
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
