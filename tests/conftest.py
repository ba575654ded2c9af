import copy

import pytest

from graphql_introspection.schema import IntrospectionSchema


def named(kind, name):
    return {"kind": kind, "name": name, "ofType": None}


def non_null(of_type):
    return {"kind": "NON_NULL", "name": None, "ofType": of_type}


def list_of(of_type):
    return {"kind": "LIST", "name": None, "ofType": of_type}


def arg(name, type_ref, description=None, default_value=None):
    return {"name": name, "description": description, "type": type_ref, "defaultValue": default_value}


def field(name, type_ref, args=None, description=None, deprecated=False, reason=None):
    return {
        "name": name,
        "description": description,
        "args": args or [],
        "type": type_ref,
        "isDeprecated": deprecated,
        "deprecationReason": reason,
    }


def object_type(name, fields, description=None, kind="OBJECT"):
    return {
        "kind": kind,
        "name": name,
        "description": description,
        "fields": fields,
        "inputFields": None,
        "interfaces": [],
        "enumValues": None,
        "possibleTypes": None,
    }


INTROSPECTION_PAYLOAD = {
    "data": {
        "__schema": {
            "queryType": {"name": "Query"},
            "mutationType": {"name": "Mutation"},
            "subscriptionType": None,
            "types": [
                object_type("Query", [
                    field(
                        "user",
                        named("OBJECT", "User"),
                        args=[arg("id", non_null(named("SCALAR", "ID")))],
                        description="Fetch a single user",
                    ),
                    field(
                        "users",
                        non_null(list_of(non_null(named("OBJECT", "User")))),
                        args=[
                            arg("first", named("SCALAR", "Int"), default_value="10"),
                            arg("filter", named("INPUT_OBJECT", "UserFilter")),
                        ],
                    ),
                    field("ping", named("SCALAR", "Boolean"), deprecated=True),
                ]),
                object_type("Mutation", [
                    field(
                        "createUser",
                        named("OBJECT", "User"),
                        args=[arg("name", non_null(named("SCALAR", "String")))],
                        description="Create a user",
                    ),
                ]),
                object_type("User", [
                    field("id", non_null(named("SCALAR", "ID"))),
                    field("name", named("SCALAR", "String"), description="Display name"),
                    field("role", named("ENUM", "Role"), deprecated=True, reason="Use roles"),
                ], description="A registered user"),
                {
                    "kind": "ENUM",
                    "name": "Role",
                    "description": None,
                    "fields": None,
                    "inputFields": None,
                    "interfaces": None,
                    "enumValues": [
                        {"name": "ADMIN", "description": "Full access", "isDeprecated": False, "deprecationReason": None},
                        {"name": "GUEST", "description": None, "isDeprecated": False, "deprecationReason": None},
                    ],
                    "possibleTypes": None,
                },
                {
                    "kind": "INPUT_OBJECT",
                    "name": "UserFilter",
                    "description": "Filter for users",
                    "fields": None,
                    "inputFields": [
                        arg("name", named("SCALAR", "String"), description="Exact name"),
                        arg("roles", list_of(non_null(named("ENUM", "Role")))),
                    ],
                    "interfaces": None,
                    "enumValues": None,
                    "possibleTypes": None,
                },
                {
                    "kind": "SCALAR",
                    "name": "String",
                    "description": "UTF-8 text",
                    "fields": None,
                    "inputFields": None,
                    "interfaces": None,
                    "enumValues": None,
                    "possibleTypes": None,
                },
            ],
            "directives": [
                {"name": "include", "description": None, "locations": ["FIELD"], "args": []},
                {"name": "skip", "description": None, "locations": ["FIELD"], "args": []},
            ],
        }
    }
}


@pytest.fixture
def introspection_payload():
    return copy.deepcopy(INTROSPECTION_PAYLOAD)


@pytest.fixture
def schema(introspection_payload):
    return IntrospectionSchema.from_response(introspection_payload)
