"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from graphql import get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from ..config import settings
from ..logging import get_logger
from .context import get_context
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)

schema = strawberry.Schema(query=Query, mutation=Mutation)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Catches unresolved type references early so the server fails fast
    instead of answering with errors at runtime.

    Raises:
        Exception: If the schema is invalid or introspection fails
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

        # Introspection exercises every type, catching most resolution issues
        result = graphql_sync(graphql_schema, get_introspection_query())

        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise Exception(f"GraphQL introspection failed: {'; '.join(error_messages)}")

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


def create_graphql_router() -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI."""
    return GraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql" if settings.graphiql else None,
        context_getter=get_context,
    )
