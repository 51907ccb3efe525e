from __future__ import annotations

import json

import pytest

from external_secrets import cli, providers
from external_secrets.errors import PayloadMissingError
from external_secrets.providers.aws.fake import FakeSecretsManagerClient
from external_secrets.providers.aws.secretsmanager import SecretsManager


@pytest.fixture
def fake(monkeypatch: pytest.MonkeyPatch) -> FakeSecretsManagerClient:
    client = FakeSecretsManagerClient()
    monkeypatch.setattr(providers, "get_provider", lambda: SecretsManager(client))
    return client


@pytest.fixture
def logging_calls(monkeypatch: pytest.MonkeyPatch) -> list[tuple[str, str]]:
    calls: list[tuple[str, str]] = []
    monkeypatch.setattr(cli, "configure_logging", lambda name, level: calls.append((name, level)))
    return calls


def test_get_prints_property(fake, logging_calls, capsysbinary):
    fake.with_value(
        {"SecretId": "prod/db", "VersionStage": "AWSCURRENT"},
        {"SecretString": '{"password": "s3cret"}'},
    )

    cli.main(["--log-level", "debug", "get", "prod/db", "--property", "password"])

    assert capsysbinary.readouterr().out == b"s3cret"
    assert logging_calls == [(cli.SERVICE_NAME, "DEBUG")]


def test_get_map_prints_json(fake, logging_calls, capsysbinary):
    fake.with_value(
        {"SecretId": "prod/env", "VersionStage": "previous"},
        {"SecretBinary": b'{"b": "2", "a": 1}'},
    )

    cli.main(["get-map", "prod/env", "--version", "previous"])

    assert json.loads(capsysbinary.readouterr().out) == {"a": "1", "b": "2"}


def test_provider_errors_exit_with_message(fake, logging_calls, capsys):
    fake.with_value(None, {})

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["get", "prod/db"])

    assert excinfo.value.code == 2
    assert str(PayloadMissingError(key="prod/db")) in capsys.readouterr().err


def test_no_command_prints_help(logging_calls, capsys):
    cli.main([])

    assert "get-map" in capsys.readouterr().out
    assert logging_calls == []
