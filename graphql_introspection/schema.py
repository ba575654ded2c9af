"""
GraphQL Introspection Models

Typed representation of an introspection result. Field names follow Python
conventions; the wire names of the introspection response are accepted as aliases.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class TypeKind(str, Enum):
    """Kinds reported by `__Type.kind`."""

    SCALAR = "SCALAR"
    OBJECT = "OBJECT"
    INTERFACE = "INTERFACE"
    UNION = "UNION"
    ENUM = "ENUM"
    INPUT_OBJECT = "INPUT_OBJECT"
    LIST = "LIST"
    NON_NULL = "NON_NULL"


class _IntrospectionModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class TypeRef(_IntrospectionModel):
    """
    Possibly wrapped type reference.

    LIST and NON_NULL carry the wrapped reference in `of_type`; named kinds carry `name`.
    Nesting stops at the depth of the introspection query's TypeRef fragment.
    """

    kind: TypeKind
    name: Optional[str] = None
    of_type: Optional["TypeRef"] = Field(default=None, alias="ofType")


class GraphQLInputValue(_IntrospectionModel):
    name: str
    description: Optional[str] = None
    type: TypeRef
    default_value: Optional[str] = Field(default=None, alias="defaultValue")


class GraphQLField(_IntrospectionModel):
    name: str
    description: Optional[str] = None
    args: List[GraphQLInputValue] = Field(default_factory=list)
    type: TypeRef
    is_deprecated: bool = Field(default=False, alias="isDeprecated")
    deprecation_reason: Optional[str] = Field(default=None, alias="deprecationReason")


class GraphQLEnumValue(_IntrospectionModel):
    name: str
    description: Optional[str] = None
    is_deprecated: bool = Field(default=False, alias="isDeprecated")
    deprecation_reason: Optional[str] = Field(default=None, alias="deprecationReason")


class GraphQLType(_IntrospectionModel):
    """Full type definition as listed in `__schema.types`."""

    kind: TypeKind
    name: str
    description: Optional[str] = None
    fields: Optional[List[GraphQLField]] = None
    input_fields: Optional[List[GraphQLInputValue]] = Field(default=None, alias="inputFields")
    enum_values: Optional[List[GraphQLEnumValue]] = Field(default=None, alias="enumValues")
    interfaces: Optional[List[TypeRef]] = None
    possible_types: Optional[List[TypeRef]] = Field(default=None, alias="possibleTypes")


class RootTypeRef(_IntrospectionModel):
    name: str


class IntrospectionSchema(_IntrospectionModel):
    """The `__schema` object of one introspection response."""

    query_type: Optional[RootTypeRef] = Field(default=None, alias="queryType")
    mutation_type: Optional[RootTypeRef] = Field(default=None, alias="mutationType")
    subscription_type: Optional[RootTypeRef] = Field(default=None, alias="subscriptionType")
    types: List[GraphQLType]
    directives: List[Dict[str, Any]] = Field(default_factory=list)

    @classmethod
    def from_response(cls, payload: Dict[str, Any]) -> Optional["IntrospectionSchema"]:
        """
        Build a schema from a raw introspection payload.

        Accepts either the full response (`{"data": {"__schema": ...}}`) or its data part.

        Returns:
            IntrospectionSchema, or None if the payload holds no `__schema`

        Raises:
            pydantic.ValidationError: If the `__schema` object has the wrong shape
        """
        data = payload.get("data", payload) if isinstance(payload, dict) else None
        if not isinstance(data, dict) or not data.get("__schema"):
            return None
        return cls.model_validate(data["__schema"])


TypeRef.model_rebuild()
