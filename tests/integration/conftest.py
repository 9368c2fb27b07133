from __future__ import annotations

import os

import httpx
import pytest

from src.adapters.aws import DEFAULT_LOCALSTACK_URL, s3_client

NETWORK_BUCKET = "metrocompare-test-networks"


@pytest.fixture(scope="session", autouse=True)
def localstack_env() -> None:
    """Point boto3 at LocalStack unless the environment already says otherwise."""

    os.environ.setdefault("ENDPOINT_URL", DEFAULT_LOCALSTACK_URL)
    os.environ.setdefault("AWS_REGION", "ap-south-1")
    # boto3 needs some credentials to sign requests, even for LocalStack.
    os.environ.setdefault("AWS_ACCESS_KEY_ID", "test")
    os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "test")


@pytest.fixture(scope="session")
def require_localstack(localstack_env: None) -> str:
    endpoint_url = os.environ["ENDPOINT_URL"]
    try:
        healthy = httpx.get(
            endpoint_url.rstrip("/") + "/_localstack/health", timeout=1.5
        ).is_success
    except httpx.HTTPError:
        healthy = False

    if not healthy:
        msg = f"LocalStack not reachable at {endpoint_url}"
        # CI starts LocalStack, so a missing one there is a failure.
        if os.getenv("CI") or os.getenv("REQUIRE_LOCALSTACK"):
            pytest.fail(msg, pytrace=False)
        pytest.skip(f"{msg}; skipping integration tests")
    return endpoint_url


@pytest.fixture(scope="session")
def network_bucket(require_localstack: str) -> str:
    s3 = s3_client()
    existing = {b["Name"] for b in s3.list_buckets().get("Buckets", [])}
    if NETWORK_BUCKET not in existing:
        s3.create_bucket(
            Bucket=NETWORK_BUCKET,
            CreateBucketConfiguration={
                "LocationConstraint": os.environ.get("AWS_REGION", "ap-south-1")
            },
        )
    return NETWORK_BUCKET
