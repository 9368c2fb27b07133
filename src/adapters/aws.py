from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

import boto3
from botocore.client import BaseClient

if TYPE_CHECKING:
    from mypy_boto3_s3 import S3Client
else:
    S3Client = BaseClient  # type: ignore[misc,assignment]

DEFAULT_REGION = "ap-south-1"
DEFAULT_LOCALSTACK_URL = "http://localhost:4566"


def _env_flag(name: str) -> bool:
    return (os.getenv(name) or "").strip().lower() in {"1", "true", "yes", "y", "on"}


@dataclass(frozen=True, slots=True)
class S3Settings:
    """Where the network dataset bucket is reached.

    Env vars:
      - AWS_REGION (default: ap-south-1)
      - ENDPOINT_URL: explicit endpoint, e.g. LocalStack at http://localhost:4566
      - USE_LOCALSTACK: when set without ENDPOINT_URL, use LOCALSTACK_ENDPOINT_URL
        (default: http://localhost:4566)
    """

    region: str = DEFAULT_REGION
    endpoint_url: str | None = None

    @classmethod
    def from_env(cls) -> S3Settings:
        endpoint_url = (os.getenv("ENDPOINT_URL") or "").strip() or None
        if endpoint_url is None and _env_flag("USE_LOCALSTACK"):
            endpoint_url = os.getenv("LOCALSTACK_ENDPOINT_URL") or DEFAULT_LOCALSTACK_URL

        return cls(
            region=os.getenv("AWS_REGION") or DEFAULT_REGION,
            endpoint_url=endpoint_url,
        )


def s3_client(settings: S3Settings | None = None) -> S3Client:
    settings = settings or S3Settings.from_env()
    session = boto3.session.Session(region_name=settings.region)
    return session.client("s3", endpoint_url=settings.endpoint_url)
