import pytest
from fastapi import HTTPException

from auth_adapter.api.responses import STATUS_CODES, respond
from auth_adapter.services.outcomes import OperationResult, Outcome


def test_every_outcome_has_a_status_code():
    assert set(STATUS_CODES) == set(Outcome)


def test_success_returns_value():
    assert respond(OperationResult(Outcome.OK, {"id": "u1"})) == {"id": "u1"}
    assert respond(OperationResult(Outcome.CREATED, [1])) == [1]


def test_no_content_is_empty_204():
    response = respond(OperationResult(Outcome.NO_CONTENT))
    assert response.status_code == 204
    assert response.body == b""


@pytest.mark.parametrize(
    "outcome,code",
    [
        (Outcome.NOT_FOUND, 404),
        (Outcome.UNPROCESSABLE, 422),
        (Outcome.CONFLICT, 409),
        (Outcome.INTERNAL_ERROR, 500),
    ],
)
def test_failures_raise_http_exception(outcome, code):
    with pytest.raises(HTTPException) as exc_info:
        respond(OperationResult(outcome, detail="nope"))
    assert exc_info.value.status_code == code
    assert exc_info.value.detail == "nope"
