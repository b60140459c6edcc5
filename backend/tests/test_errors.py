from __future__ import annotations

import pytest

from apienvelope.core.errors import ClientError, NoResponseError, ResponseError, ServerError
from apienvelope.core.messages import ErrorMessage, default_message


def test_server_error_defaults() -> None:
    err = ServerError()
    assert err.status == 500
    assert err.message == ErrorMessage.INTERNAL_SERVER_ERROR_500.value
    assert err.description == ErrorMessage.CONTACT_ADMINISTRATOR.value
    assert str(err) == "Internal Server Error"


def test_no_response_error_defaults() -> None:
    err = NoResponseError()
    assert err.status == 500
    assert err.message == "Internal Server Error"
    assert err.description == "Please contact the administrator."


def test_client_error_requires_status_and_message() -> None:
    with pytest.raises(TypeError):
        ClientError()  # type: ignore[call-arg]
    with pytest.raises(TypeError):
        ClientError(404)  # type: ignore[call-arg]

    err = ClientError(404, "Not found")
    assert err.status == 404
    assert err.message == "Not found"
    assert err.description == ""


def test_errors_are_raisable_response_errors() -> None:
    for err in (NoResponseError(), ServerError(), ClientError(409, "Conflict", "dup")):
        assert isinstance(err, ResponseError)
        with pytest.raises(ResponseError) as info:
            raise err
        assert info.value is err
        assert info.value.args == (err.message,)


def test_catalog_message_is_stored_as_plain_string() -> None:
    err = ClientError(404, ErrorMessage.NOT_FOUND_404)
    assert type(err.message) is str
    assert err.message == "Not Found"


def test_default_message_lookup() -> None:
    assert default_message(404) == "Not Found"
    assert default_message(503) == "Service Unavailable"
    assert default_message(418) == "Internal Server Error"
