from __future__ import annotations

from typing import Any

import pytest
from botocore.exceptions import ClientError

from external_secrets.errors import SessionError
from external_secrets.providers.aws import SecretsManager, new, new_session
from external_secrets.providers.aws.session import ROLE_SESSION_NAME


class _FakeSts:
    def __init__(self, response: dict[str, Any] | None = None, error: Exception | None = None) -> None:
        self._response = response or {}
        self._error = error
        self.calls: list[dict[str, Any]] = []

    def assume_role(self, **kwargs: Any) -> dict[str, Any]:
        self.calls.append(kwargs)
        if self._error is not None:
            raise self._error
        return self._response


def test_constructor_builds_client_from_session(clean_aws_env):
    session = new_session("1111", "2222", "eu-west-1")

    provider = new(session)

    assert isinstance(provider, SecretsManager)
    assert provider.client is not None
    assert provider.client.meta.region_name == "eu-west-1"
    credentials = session.get_credentials()
    assert credentials.access_key == "1111"
    assert credentials.secret_key == "2222"


def test_session_requires_both_credential_parts(clean_aws_env):
    with pytest.raises(SessionError):
        new_session("1111", None, "eu-west-1")


def test_session_assumes_role(clean_aws_env):
    sts = _FakeSts(
        {
            "Credentials": {
                "AccessKeyId": "ASIATEMP",
                "SecretAccessKey": "temp-secret",
                "SessionToken": "temp-token",
            }
        }
    )

    session = new_session(
        "1111",
        "2222",
        "eu-west-1",
        "arn:aws:iam::123456789012:role/reader",
        sts_client_factory=lambda base: sts,
    )

    assert sts.calls == [
        {
            "RoleArn": "arn:aws:iam::123456789012:role/reader",
            "RoleSessionName": ROLE_SESSION_NAME,
        }
    ]
    credentials = session.get_credentials()
    assert credentials.access_key == "ASIATEMP"
    assert credentials.token == "temp-token"
    assert session.region_name == "eu-west-1"


def test_session_reports_assume_role_failure(clean_aws_env):
    error = ClientError({"Error": {"Code": "AccessDenied", "Message": "denied"}}, "AssumeRole")
    sts = _FakeSts(error=error)

    with pytest.raises(SessionError, match="unable to assume role"):
        new_session("1111", "2222", "eu-west-1", "arn:role", sts_client_factory=lambda base: sts)


def test_session_rejects_incomplete_assume_role_response(clean_aws_env):
    sts = _FakeSts({"Credentials": {"AccessKeyId": "ASIATEMP"}})

    with pytest.raises(SessionError, match="missing"):
        new_session("1111", "2222", "eu-west-1", "arn:role", sts_client_factory=lambda base: sts)
