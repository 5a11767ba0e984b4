"""Minimal ArcGIS feature layer client: paged queries and batch updates."""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Type, TypeVar
import json
import logging

import requests
from pydantic import BaseModel, ValidationError

from rail_direction.core.errors import FeatureServiceError
from rail_direction.data.features import EditResult


logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class ArcGISFeatureClient:
    """Talks to `<layer>/query` and `<layer>/updateFeatures` with a token.

    Requests are never retried; `timeout` is passed through to requests as is.
    """

    def __init__(self, session: Optional[requests.Session] = None, timeout: Optional[float] = None) -> None:
        self._session = session or requests.Session()
        self._timeout = timeout

    def query_features(
        self,
        layer_url: str,
        token: str,
        model: Type[M],
        where: str = "1=1",
        out_fields: str = "*",
    ) -> List[M]:
        params: Dict[str, Any] = {
            "where": where,
            "outFields": out_fields,
            "returnGeometry": "true",
            "f": "json",
            "token": token,
        }
        records: List[dict] = []
        previous: Optional[list] = None
        while True:
            payload = self._call("GET", f"{layer_url}/query", params=params)
            page = payload.get("features", [])
            # Layers without pagination support ignore resultOffset and repeat the first page.
            if page == previous:
                raise FeatureServiceError(
                    f"{layer_url}: server returned the same page at offset {params['resultOffset']}; "
                    "resultOffset is not supported"
                )
            previous = page
            records.extend(page)
            logger.debug(f"{layer_url}: {len(page)} record(s) at offset {params.get('resultOffset', 0)}")
            # Server caps pages at its maxRecordCount and sets this flag when more remain.
            if not payload.get("exceededTransferLimit") or not page:
                break
            params = {**params, "resultOffset": len(records)}

        try:
            return [model.model_validate(record) for record in records]
        except ValidationError as exc:
            raise FeatureServiceError(f"{layer_url}: unexpected feature record: {exc}") from exc

    def update_features(self, layer_url: str, token: str, features: Sequence[BaseModel]) -> List[EditResult]:
        data = {
            "features": json.dumps([feature.model_dump(mode="json") for feature in features]),
            "f": "json",
            "token": token,
        }
        payload = self._call("POST", f"{layer_url}/updateFeatures", data=data)
        items = payload.get("updateResults")
        if not isinstance(items, list):
            raise FeatureServiceError(f"{layer_url}: update response has no updateResults")
        if len(items) != len(features):
            raise FeatureServiceError(
                f"{layer_url}: {len(items)} update result(s) for {len(features)} submitted feature(s)"
            )
        try:
            return [EditResult.model_validate(item) for item in items]
        except ValidationError as exc:
            raise FeatureServiceError(f"{layer_url}: unexpected update result: {exc}") from exc

    def _call(self, method: str, url: str, **kwargs: Any) -> dict:
        logger.debug(f"{method} {url}")
        try:
            response = self._session.request(method, url, timeout=self._timeout, **kwargs)
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as exc:
            raise FeatureServiceError(f"{method} {url} failed: {exc}") from exc

        if not isinstance(payload, dict):
            raise FeatureServiceError(f"{url}: expected a JSON object, got {type(payload).__name__}")
        # Service errors come back with HTTP 200 and an error envelope.
        error = payload.get("error")
        if error:
            raise FeatureServiceError.from_payload(url, error)
        return payload
