# jobboard/gql/auth.py
import logging
from functools import wraps

from graphql import GraphQLError

from jobboard.errors import JobBoardError
from jobboard.utils import token_from_header

log = logging.getLogger(__name__)


def get_board(info):
    """The JobBoard attached to the running application."""
    request_object = info.context.get('request')
    if not request_object:
        log.warning("GraphQL context missing 'request' object.")
        raise GraphQLError("Request context not available.")
    return request_object.app.state.board


def bearer_token(info) -> str | None:
    """Extracts the token from 'Authorization: Bearer <token>', or None."""
    request_object = info.context.get('request')
    if not request_object:
        return None
    return token_from_header(request_object.headers.get('Authorization'))


def board_errors(func):
    """ Decorator: reports job board errors as GraphQL errors carrying the error code. """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except JobBoardError as e:
            log.info(f"'{func.__name__}' rejected with {e.code}: {e.message}")
            raise GraphQLError(e.message, extensions={"code": e.code})
    return wrapper
