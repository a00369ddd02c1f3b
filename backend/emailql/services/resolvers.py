# backend/emailql/services/resolvers.py
from ariadne import QueryType

from .syntax import EmailChecker


def format_message(email: str, valid: bool) -> str:
    verdict = "valid" if valid else "invalid"
    return f"The email '{email}' is {verdict}."


def check_email(checker: EmailChecker, email: str) -> bool:
    # a failing checker counts as a rejection, never a GraphQL error
    try:
        return bool(checker(email))
    except Exception:
        return False


def make_query_type(checker: EmailChecker) -> QueryType:
    """Bind the root ``Query`` fields to the given checker."""
    query = QueryType()

    @query.field("validateEmail")
    def resolve_validate_email(_, info, email: str) -> str:
        return format_message(email, check_email(checker, email))

    return query
