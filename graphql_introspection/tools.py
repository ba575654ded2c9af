"""GraphQL introspection tools for LLM agents."""

import asyncio
from typing import List, Optional, Type

from pydantic import BaseModel, Field, ConfigDict

from langchain_core.tools import BaseTool
from langchain_core.callbacks import CallbackManagerForToolRun, AsyncCallbackManagerForToolRun


class GraphQLNoInput(BaseModel):
    """Input for tools that read the whole schema."""
    pass


class _GraphQLSourceTool(BaseTool):
    """Shared plumbing: holds the GraphQL source and runs `_arun` for sync callers."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    def __init__(self, graphql_source):
        super().__init__()
        self._graphql_source = graphql_source

    @property
    def graphql_source(self):
        return self._graphql_source


class GraphQLSchemaInfoTool(_GraphQLSourceTool):
    """
    Tool to get an overview of the endpoint's schema.
    """

    name: str = "introspect_schema"
    description: str = "Get full GraphQL schema information from endpoint"
    args_schema: Type[BaseModel] = GraphQLNoInput

    def _run(
        self,
        run_manager: Optional[CallbackManagerForToolRun] = None,
    ) -> str:
        """Get GraphQL schema info synchronously."""
        return asyncio.run(self._arun())

    async def _arun(
        self,
        run_manager: Optional[AsyncCallbackManagerForToolRun] = None,
    ) -> str:
        return await self.graphql_source.schema_summary()


class GraphQLQueriesTool(_GraphQLSourceTool):
    """
    Tool to list every field of the query root type.
    """

    name: str = "get_graphql_gql_queries"
    description: str = "List all available graphql/gql queries with description and parameters"
    args_schema: Type[BaseModel] = GraphQLNoInput

    def _run(
        self,
        run_manager: Optional[CallbackManagerForToolRun] = None,
    ) -> str:
        return asyncio.run(self._arun())

    async def _arun(
        self,
        run_manager: Optional[AsyncCallbackManagerForToolRun] = None,
    ) -> str:
        return await self.graphql_source.list_queries()


class GraphQLMutationsTool(_GraphQLSourceTool):
    """
    Tool to list every field of the mutation root type.
    """

    name: str = "get_graphql_gql_mutations"
    description: str = "List all available graphql/gql mutations description and parameters"
    args_schema: Type[BaseModel] = GraphQLNoInput

    def _run(
        self,
        run_manager: Optional[CallbackManagerForToolRun] = None,
    ) -> str:
        return asyncio.run(self._arun())

    async def _arun(
        self,
        run_manager: Optional[AsyncCallbackManagerForToolRun] = None,
    ) -> str:
        return await self.graphql_source.list_mutations()


class GraphQLTypeDetailInput(BaseModel):
    """Input for GraphQL type detail tool."""
    type_names: List[str] = Field(description="Names of the GraphQL types to inspect")


class GraphQLTypeDetailTool(_GraphQLSourceTool):
    """
    Tool to get fields, enum values and input fields of specific GraphQL types.
    """

    name: str = "get_graphql_type_details"
    description: str = """
    Get detailed information about specific GraphQL/gql types.

    Input: list of exact type names to examine
    Example: ["User", "UserFilter", "Role"]

    Names that do not exist in the schema are reported on the first line.
    """
    args_schema: Type[BaseModel] = GraphQLTypeDetailInput

    def _run(
        self,
        type_names: List[str],
        run_manager: Optional[CallbackManagerForToolRun] = None,
    ) -> str:
        """Get GraphQL type details synchronously."""
        return asyncio.run(self._arun(type_names))

    async def _arun(
        self,
        type_names: List[str],
        run_manager: Optional[AsyncCallbackManagerForToolRun] = None,
    ) -> str:
        return await self.graphql_source.type_details(type_names)
