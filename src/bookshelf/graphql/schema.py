"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from ..catalog import Catalog, default_catalog
from ..config import settings
from ..errors import SchemaValidationError
from ..logging import get_logger
from .queries.root import Query

logger = get_logger(__name__)

# Create the GraphQL schema
schema = strawberry.Schema(query=Query)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Runs graphql-core's structural validation and an introspection query so
    that unresolved lazy type references fail the server at boot.

    Raises:
        SchemaValidationError: If the schema is invalid or has unresolved types
    """
    graphql_schema = schema._schema

    errors = gql_validate_schema(graphql_schema)
    if errors:
        error_messages = "; ".join(str(e) for e in errors)
        logger.error("GraphQL schema validation failed", error=error_messages)
        raise SchemaValidationError(f"GraphQL schema validation failed: {error_messages}")

    result = graphql_sync(graphql_schema, get_introspection_query())
    if result.errors:
        error_messages = "; ".join(str(e) for e in result.errors)
        logger.error("GraphQL introspection failed", error=error_messages)
        raise SchemaValidationError(f"GraphQL introspection failed: {error_messages}")

    logger.info("GraphQL schema validation successful")


def print_schema() -> str:
    """Return the schema in SDL form."""
    return schema.as_str()


def create_graphql_router(catalog: Catalog | None = None) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI."""
    active_catalog = catalog if catalog is not None else default_catalog

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        return {
            "request": request,
            "catalog": active_catalog,
        }

    return GraphQLRouter(
        schema,
        path=settings.graphql_path,
        graphiql=settings.graphiql,
        context_getter=get_context,
    )
