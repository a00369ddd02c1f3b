# backend/emailql/services/schema.py
import logging

from ariadne import load_schema_from_path, make_executable_schema
from graphql import GraphQLSchema

from .resolvers import make_query_type
from .syntax import EmailChecker

logger = logging.getLogger("emailql.schema")


def build_schema(checker: EmailChecker, schema_path: str) -> GraphQLSchema:
    """
    Load the SDL from ``schema_path`` and bind resolvers to ``checker``.
    Called once while the app is being created; the result is never mutated.
    """
    type_defs = load_schema_from_path(schema_path)
    schema = make_executable_schema(type_defs, make_query_type(checker))
    logger.debug("GraphQL schema loaded from %s", schema_path)
    return schema
