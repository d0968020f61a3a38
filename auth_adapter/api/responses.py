"""
Translation of adapter outcomes into HTTP responses.
"""
from fastapi import HTTPException, status
from starlette.responses import Response

from auth_adapter.services.outcomes import OperationResult, Outcome

STATUS_CODES = {
    Outcome.OK: status.HTTP_200_OK,
    Outcome.CREATED: status.HTTP_201_CREATED,
    Outcome.NO_CONTENT: status.HTTP_204_NO_CONTENT,
    Outcome.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    Outcome.UNPROCESSABLE: 422,
    Outcome.CONFLICT: status.HTTP_409_CONFLICT,
    Outcome.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def respond(result: OperationResult):
    """Return the result's value, an empty 204, or raise for failures."""
    if result.outcome is Outcome.NO_CONTENT:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    if not result.ok:
        raise HTTPException(status_code=STATUS_CODES[result.outcome], detail=result.detail)
    return result.value
