"""Base GraphQL Introspection Toolkit implementation."""

import logging
from typing import List, Optional, Dict

from langchain_core.tools import BaseTool, BaseToolkit
from pydantic import ConfigDict

from .graphql import (
    SchemaFetchError,
    fetch_graphql_schema,
    render_root_fields,
    render_schema_summary,
    render_type_details,
)
from .schema import IntrospectionSchema
from .tools import (
    GraphQLSchemaInfoTool,
    GraphQLQueriesTool,
    GraphQLMutationsTool,
    GraphQLTypeDetailTool
)

logger = logging.getLogger(__name__)


class GraphQLSource:
    """
    GraphQL endpoint connection wrapper.

    Holds the endpoint configuration only. Every operation fetches the schema
    again, so two calls never share a snapshot.
    """

    def __init__(
        self,
        endpoint: str,
        headers: Optional[Dict[str, str]] = None
    ):
        """
        Initialize GraphQL endpoint connection.

        Args:
            endpoint: GraphQL endpoint URL
            headers: Optional HTTP headers
        """
        self.endpoint = endpoint
        self.headers = headers or {}

    async def get_schema(self) -> IntrospectionSchema:
        """Fetch the endpoint's schema. Raises SchemaFetchError on failure."""
        return await fetch_graphql_schema(self.endpoint, headers=self.headers)

    async def schema_summary(self) -> str:
        """Root type names, type count and directive count of the endpoint's schema."""
        try:
            schema = await self.get_schema()
        except SchemaFetchError as e:
            return e.message
        return render_schema_summary(schema, self.endpoint)

    async def list_queries(self) -> str:
        try:
            schema = await self.get_schema()
        except SchemaFetchError as e:
            return e.message
        return render_root_fields(schema, "query")

    async def list_mutations(self) -> str:
        try:
            schema = await self.get_schema()
        except SchemaFetchError as e:
            return e.message
        return render_root_fields(schema, "mutation")

    async def type_details(self, type_names: List[str]) -> str:
        """
        Describe the named types.

        Args:
            type_names: Names of the GraphQL types to inspect

        Returns:
            Formatted details; unknown names are listed first, a fetch failure replaces the whole output
        """
        try:
            schema = await self.get_schema()
        except SchemaFetchError as e:
            return e.message
        logger.debug("Rendering details for %d type(s)", len(type_names))
        return render_type_details(schema, type_names)

    def get_endpoint(self) -> str:
        """Get the GraphQL endpoint URL."""
        return self.endpoint


class GraphQLToolkit(BaseToolkit):
    """
    GraphQL Introspection Toolkit.

    Provides tools for LLM agents to discover the queries, mutations and types
    of a GraphQL endpoint.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    graphql_source: GraphQLSource

    def __init__(self, graphql_source: GraphQLSource, **kwargs):
        """
        Initialize the GraphQL toolkit.

        Args:
            graphql_source: GraphQL source connection with schema access
        """
        super().__init__(graphql_source=graphql_source, **kwargs)

    def get_tools(self) -> List[BaseTool]:
        """
        Get all available GraphQL tools.

        Returns:
            List of GraphQL tools
        """
        return [
            GraphQLSchemaInfoTool(graphql_source=self.graphql_source),
            GraphQLQueriesTool(graphql_source=self.graphql_source),
            GraphQLMutationsTool(graphql_source=self.graphql_source),
            GraphQLTypeDetailTool(graphql_source=self.graphql_source)
        ]


# Factory function for creating GraphQL toolkit
def create_graphql_toolkit(
    endpoint: str,
    headers: Optional[Dict[str, str]] = None
) -> GraphQLToolkit:
    """
    Create a GraphQL toolkit instance.

    Args:
        endpoint: GraphQL endpoint URL
        headers: Optional HTTP headers

    Returns:
        GraphQL toolkit instance
    """
    graphql_source = GraphQLSource(endpoint=endpoint, headers=headers)
    return GraphQLToolkit(graphql_source=graphql_source)
