"""Tests for HTTP error translation and bearer token parsing."""

import pytest

from portal.adapter.error import (
    DeliveryFailedError,
    ProviderError,
    RemoteTimeoutError,
    RemoteUnavailableError,
)
from portal.domain.error import (
    AccountInactiveError,
    DomainError,
    DuplicateActiveInviteError,
    EmailAlreadyRegisteredError,
    ExpiredTokenError,
    InvalidCredentialsError,
    MissingTokenError,
    NotFoundError,
    ProfileProvisioningFailedError,
    UnauthenticatedError,
    UnauthorizedError,
    ValidationError,
)
from portal.interface.api.bearer import bearer_token
from portal.interface.error import to_http_error


class TestToHttpError:
    @pytest.mark.parametrize(
        "error,status_code",
        [
            (UnauthenticatedError(), 401),
            (InvalidCredentialsError(), 401),
            (AccountInactiveError(), 403),
            (UnauthorizedError(), 403),
            (ValidationError("bad email"), 422),
            (DuplicateActiveInviteError("b@x.com"), 409),
            (EmailAlreadyRegisteredError("a@x.com"), 409),
            (MissingTokenError(), 400),
            (ExpiredTokenError(), 400),
            (NotFoundError("Profile", "1"), 404),
            (ProfileProvisioningFailedError("1"), 500),
            (RemoteTimeoutError("slow"), 504),
            (RemoteUnavailableError("down"), 503),
            (DeliveryFailedError("Resend error (500): x", 500), 502),
            (ProviderError("odd"), 502),
            (DomainError("other"), 500),
        ],
    )
    def test_status_codes(self, error, status_code):
        http_error = to_http_error(error)

        assert http_error.status_code == status_code
        assert http_error.detail == str(error)

    def test_duplicate_message(self):
        http_error = to_http_error(DuplicateActiveInviteError("b@x.com"))

        assert http_error.detail == "An active invite already exists for this email."


class TestBearerToken:
    @pytest.mark.parametrize(
        "header,expected",
        [
            (None, None),
            ("", None),
            ("Bearer abc", "abc"),
            ("bearer  abc ", "abc"),
            ("Basic abc", None),
            ("Bearer ", None),
            ("abc", None),
        ],
    )
    def test_parse(self, header, expected):
        assert bearer_token(header) == expected
