"""Build boto3 sessions for the AWS providers."""
from __future__ import annotations

import logging
from typing import Any, Callable

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from external_secrets.errors import SessionError

logger = logging.getLogger(__name__)

ROLE_SESSION_NAME = "external-secrets-provider"

StsClientFactory = Callable[[boto3.session.Session], Any]


def _default_sts_client(session: boto3.session.Session) -> Any:
    return session.client("sts")


def new_session(
    access_key_id: str | None,
    secret_access_key: str | None,
    region: str | None,
    role: str | None = None,
    *,
    sts_client_factory: StsClientFactory | None = None,
) -> boto3.session.Session:
    """Return a session for ``region``.

    Static credentials are used when both parts are given, otherwise boto3's
    default credential chain applies. When ``role`` is set the base session
    assumes it through STS and the returned session carries the temporary
    credentials.
    """

    if bool(access_key_id) != bool(secret_access_key):
        raise SessionError(
            "access key id and secret access key must be provided together"
        )

    kwargs: dict[str, Any] = {}
    if access_key_id and secret_access_key:
        kwargs["aws_access_key_id"] = access_key_id
        kwargs["aws_secret_access_key"] = secret_access_key
    if region:
        kwargs["region_name"] = region
    session = boto3.session.Session(**kwargs)

    if not role:
        return session

    factory = sts_client_factory or _default_sts_client
    sts = factory(session)
    logger.debug("assuming role", extra={"role_arn": role})
    try:
        response = sts.assume_role(RoleArn=role, RoleSessionName=ROLE_SESSION_NAME)
    except (BotoCoreError, ClientError) as exc:
        raise SessionError(f"unable to assume role {role}: {exc}") from exc

    credentials = response.get("Credentials") or {}
    try:
        return boto3.session.Session(
            aws_access_key_id=credentials["AccessKeyId"],
            aws_secret_access_key=credentials["SecretAccessKey"],
            aws_session_token=credentials["SessionToken"],
            region_name=region,
        )
    except KeyError as exc:
        raise SessionError(f"assume role response for {role} is missing {exc}") from exc


__all__ = ["ROLE_SESSION_NAME", "new_session"]
