"""GraphQL schema introspection tools for LLM agents and MCP hosts."""

from .base import GraphQLToolkit, GraphQLSource, create_graphql_toolkit
from .tools import (
    GraphQLSchemaInfoTool,
    GraphQLQueriesTool,
    GraphQLMutationsTool,
    GraphQLTypeDetailTool
)
from .graphql import (
    SchemaFetchError,
    fetch_graphql_schema,
    find_type,
    format_field,
    format_type,
    format_type_details,
    render_root_fields,
    render_schema_summary,
    render_type_details
)
from .schema import IntrospectionSchema, TypeRef

__all__ = [
    "SchemaFetchError",
    "fetch_graphql_schema",
    "find_type",
    "format_field",
    "format_type",
    "format_type_details",
    "render_root_fields",
    "render_schema_summary",
    "render_type_details",
    "IntrospectionSchema",
    "TypeRef",
    "GraphQLToolkit",
    "GraphQLSource",
    "create_graphql_toolkit",
    "GraphQLSchemaInfoTool",
    "GraphQLQueriesTool",
    "GraphQLMutationsTool",
    "GraphQLTypeDetailTool"
]
