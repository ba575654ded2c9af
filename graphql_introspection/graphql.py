"""
GraphQL Schema Introspection Module

Fetches an endpoint's schema with a single introspection query and renders queries,
mutations and named types as readable text.
"""

import asyncio
import logging
from typing import Dict, List, Optional

import aiohttp
from graphql import get_introspection_query
from pydantic import ValidationError

from .schema import (
    GraphQLEnumValue,
    GraphQLField,
    GraphQLInputValue,
    GraphQLType,
    IntrospectionSchema,
    RootTypeRef,
    TypeKind,
    TypeRef,
)

logger = logging.getLogger(__name__)

# Standard introspection query from graphql-core, deprecated fields and enum values included
INTROSPECTION_QUERY = get_introspection_query(descriptions=True)

UNKNOWN_ERROR = "Unknown error occurred"
NO_SCHEMA_ERROR = "Failed to retrieve schema information"

STATUS_MESSAGES = {
    500: "GraphQL server error (500). The endpoint may not support introspection or there's a server issue.",
    403: "GraphQL introspection is disabled on this endpoint (403 Forbidden).",
    404: "GraphQL endpoint not found (404). Please check the URL.",
}


class SchemaFetchError(Exception):
    """Introspection request failed; `str(error)` is the user-facing message."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status

    @property
    def message(self) -> str:
        return str(self)


def describe_status(status: int) -> str:
    """Map an HTTP status code to the message reported for a failed introspection request."""
    return STATUS_MESSAGES.get(status, f"GraphQL request failed with status {status}")


def _fail(error: Exception, message: Optional[str], status: Optional[int] = None) -> SchemaFetchError:
    logger.error("Error making GraphQL request: %r", error)
    return SchemaFetchError(message or UNKNOWN_ERROR, status=status)


def _error_messages(errors) -> str:
    if not isinstance(errors, list):
        errors = [errors]
    return "; ".join(error.get("message", str(error)) if isinstance(error, dict) else str(error) for error in errors)


async def fetch_graphql_schema(endpoint: str, headers: Optional[Dict[str, str]] = None) -> IntrospectionSchema:
    """
    Fetch schema information from GraphQL endpoint

    Args:
        endpoint: GraphQL endpoint URL
        headers: Optional HTTP headers sent with the request

    Returns:
        IntrospectionSchema: Parsed `__schema` of the response

    Raises:
        SchemaFetchError: If the request fails or the response holds no usable schema
    """
    logger.debug("Fetching introspection schema from %s", endpoint)

    try:
        async with aiohttp.ClientSession() as session:
            async with session.post(
                endpoint,
                json={"query": INTROSPECTION_QUERY},
                headers={**(headers or {}), "Content-Type": "application/json"}
            ) as response:
                response.raise_for_status()
                data = await response.json(content_type=None)
    except aiohttp.ClientResponseError as e:
        raise _fail(e, describe_status(e.status), status=e.status) from e
    except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
        raise _fail(e, str(e)) from e

    if not isinstance(data, dict):
        raise _fail(TypeError(f"Unexpected response body: {data!r}"), NO_SCHEMA_ERROR)

    try:
        schema = IntrospectionSchema.from_response(data)
    except ValidationError as e:
        raise _fail(e, f"Invalid introspection response: {e.error_count()} validation error(s)") from e

    if schema is None:
        errors = data.get("errors")
        if errors:
            raise _fail(RuntimeError(errors), _error_messages(errors))
        raise _fail(RuntimeError("Response has no __schema"), NO_SCHEMA_ERROR)
    return schema


def find_type(schema: IntrospectionSchema, name: Optional[str]) -> Optional[GraphQLType]:
    """Return the first type in `schema.types` named `name`, or None."""
    if not name:
        return None
    for type_def in schema.types:
        if type_def.name == name:
            return type_def
    return None


def format_type(type_ref: TypeRef) -> str:
    """
    Convert a type reference to its SDL style signature, e.g. `[User!]!`

    Args:
        type_ref: Possibly wrapped type reference

    Returns:
        str: Signature, "Unknown" where no name can be found
    """
    if type_ref.of_type is None:
        return type_ref.name or "Unknown"
    if type_ref.kind == TypeKind.NON_NULL:
        return f"{format_type(type_ref.of_type)}!"
    if type_ref.kind == TypeKind.LIST:
        return f"[{format_type(type_ref.of_type)}]"
    return type_ref.name or "Unknown"


def format_field(field: GraphQLField) -> str:
    """
    Format a field as its signature line followed by description and deprecation lines

    Args:
        field: Field definition

    Returns:
        str: Newline separated block; lines without content are left out
    """
    args = ""
    if field.args:
        args = "(" + ", ".join(f"{arg.name}: {format_type(arg.type)}" for arg in field.args) + ")"

    lines = [f"{field.name}{args}: {format_type(field.type)}"]
    if field.description:
        lines.append(f"  Description: {field.description}")
    if field.is_deprecated:
        lines.append(f"  DEPRECATED: {field.deprecation_reason or 'No reason given'}")
    return "\n".join(lines)


def format_enum_value(value: GraphQLEnumValue) -> str:
    if value.description:
        return f"{value.name} - {value.description}"
    return value.name


def format_input_field(field: GraphQLInputValue) -> str:
    signature = f"{field.name}: {format_type(field.type)}"
    if field.description:
        return f"{signature} - {field.description}"
    return signature


def format_type_details(type_def: GraphQLType) -> str:
    """
    Format a named type: header, then the Fields, Enum Values and Input Fields sections

    Args:
        type_def: Type definition

    Returns:
        str: Text block; empty or missing collections produce no section
    """
    details = [
        f"Type: {type_def.name}",
        f"Kind: {type_def.kind.value}",
    ]
    if type_def.description:
        details.append(f"Description: {type_def.description}")

    if type_def.fields:
        details.append("\nFields:")
        details.extend(f"  {format_field(field)}" for field in type_def.fields)

    if type_def.enum_values:
        details.append("\nEnum Values:")
        details.extend(f"  {format_enum_value(value)}" for value in type_def.enum_values)

    if type_def.input_fields:
        details.append("\nInput Fields:")
        details.extend(f"  {format_input_field(field)}" for field in type_def.input_fields)

    return "\n".join(details)


def _root_name(root: Optional[RootTypeRef]) -> str:
    return root.name if root else "None"


def render_schema_summary(schema: IntrospectionSchema, endpoint: str) -> str:
    """Summarize root types, type count and directive count of a schema."""
    return "\n".join([
        f"GraphQL Schema for {endpoint}",
        f"Query Type: {_root_name(schema.query_type)}",
        f"Mutation Type: {_root_name(schema.mutation_type)}",
        f"Subscription Type: {_root_name(schema.subscription_type)}",
        f"Total Types: {len(schema.types)}",
        f"Directives: {len(schema.directives)}",
    ])


def render_root_fields(schema: IntrospectionSchema, operation: str = "query") -> str:
    """
    List every field of the query or mutation root type

    Args:
        schema: Fetched schema
        operation: "query" or "mutation"

    Returns:
        str: Formatted fields under an "Available ..." header, or the not-found message
    """
    if operation == "query":
        root, header = schema.query_type, "Available Queries:"
    elif operation == "mutation":
        root, header = schema.mutation_type, "Available Mutations:"
    else:
        raise ValueError(f"Unsupported root operation: {operation}")

    root_type = find_type(schema, root.name if root else None)
    if not root_type or not root_type.fields:
        return f"No {operation} type found in schema"

    formatted = "\n\n".join(format_field(field) for field in root_type.fields)
    return f"{header}\n\n{formatted}"


def render_type_details(schema: IntrospectionSchema, type_names: List[str]) -> str:
    """
    Describe each requested type

    Names that do not resolve are reported on one leading line; found types follow in
    request order, separated by `---`.

    Args:
        schema: Fetched schema
        type_names: Names of the types to describe

    Returns:
        str: Formatted type details
    """
    if not type_names:
        return "No type names provided"

    found_types = []
    not_found_types = []
    for type_name in type_names:
        type_def = find_type(schema, type_name)
        if type_def:
            found_types.append(type_def)
        else:
            not_found_types.append(type_name)

    result = []
    if not_found_types:
        result.append(f"Types not found: {', '.join(not_found_types)}")
    result.extend(format_type_details(type_def) for type_def in found_types)

    return "\n\n---\n\n".join(result)
