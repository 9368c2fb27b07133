from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Mapping

from botocore.exceptions import BotoCoreError, ClientError

from src.adapters.aws import s3_client
from src.app.ports.output import INetworkRepository
from src.domain.exceptions import NetworkDataError

from .geojson_document import decode_features

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class S3GeoJsonNetworkRepository(INetworkRepository):
    """Loads the metro network GeoJSON from S3.

    Env vars:
      - NETWORK_S3_BUCKET: bucket name
      - NETWORK_S3_KEY: object key (default: network.geojson)
      - AWS_REGION, ENDPOINT_URL, USE_LOCALSTACK: see `S3Settings`
    """

    bucket: str | None = None
    key: str | None = None

    def _bucket(self) -> str:
        value = self.bucket or os.getenv("NETWORK_S3_BUCKET")
        if not value:
            raise NetworkDataError("No S3 bucket configured (set NETWORK_S3_BUCKET)")
        return value

    def _key(self) -> str:
        return self.key or os.getenv("NETWORK_S3_KEY") or "network.geojson"

    def load_features(self) -> list[Mapping[str, Any]]:
        source = f"s3://{self._bucket()}/{self._key()}"

        try:
            obj = s3_client().get_object(Bucket=self._bucket(), Key=self._key())
            body = obj["Body"].read()
        except (ClientError, BotoCoreError) as exc:
            raise NetworkDataError(f"Could not fetch {source}: {exc}") from exc

        features = decode_features(body, source=source)
        logger.info("Loaded %d features from %s", len(features), source)
        return features
