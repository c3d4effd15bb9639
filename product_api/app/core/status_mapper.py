"""
Translation of orchestrator outcomes into HTTP status codes.

This is the only place where internal outcome kinds become externally
visible codes.  The table is total over ``Outcome``; anything else is a
programming error and raises ``TypeError``.
"""

from fastapi import status

from .outcomes import InvalidPayload, MissingToken, NotFound, Operation, Outcome, Success, Unauthorized

_SUCCESS_STATUS = {
    Operation.CREATE: status.HTTP_201_CREATED,
    Operation.DELETE: status.HTTP_204_NO_CONTENT,
}

_FAILURE_STATUS = {
    NotFound: status.HTTP_404_NOT_FOUND,
    InvalidPayload: status.HTTP_400_BAD_REQUEST,
    Unauthorized: status.HTTP_401_UNAUTHORIZED,
    MissingToken: status.HTTP_401_UNAUTHORIZED,
}


def status_for(outcome: Outcome) -> int:
    """Return the HTTP status code for ``outcome``."""
    if isinstance(outcome, Success):
        return _SUCCESS_STATUS.get(outcome.operation, status.HTTP_200_OK)
    try:
        return _FAILURE_STATUS[type(outcome)]
    except KeyError:
        raise TypeError(f"Unknown outcome: {outcome!r}") from None
