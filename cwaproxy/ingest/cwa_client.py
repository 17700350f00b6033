"""CWA open data API client for the 36-hour general forecast dataset."""

import httpx

from cwaproxy.config.defaults import CWA_BASE_URL, CWA_FORECAST_DATASET
from cwaproxy.models.errors import (
    GENERIC_FETCH_MESSAGE,
    MalformedUpstreamDataError,
    NetworkError,
    UpstreamError,
)


class CwaClient:
    """Single-shot GET against the CWA datastore. No retries."""

    def __init__(
        self,
        api_key: str,
        base_url: str = CWA_BASE_URL,
        dataset_id: str = CWA_FORECAST_DATASET,
        timeout: float = 30.0,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.dataset_id = dataset_id
        self.timeout = timeout

    def get_forecast(self, location_name: str) -> dict:
        """Fetch the raw forecast document for one canonical location name.

        Raises UpstreamError on a non-2xx status, NetworkError when no
        response arrives, MalformedUpstreamDataError on a non-JSON body.
        """
        url = f"{self.base_url}/v1/rest/datastore/{self.dataset_id}"
        params = {"Authorization": self.api_key, "locationName": location_name}
        try:
            resp = httpx.get(
                url, params=params, timeout=self.timeout, follow_redirects=True
            )
        except httpx.RequestError as e:
            raise NetworkError() from e

        if not resp.is_success:
            details = _response_body(resp)
            message = GENERIC_FETCH_MESSAGE
            if isinstance(details, dict) and details.get("message"):
                message = str(details["message"])
            raise UpstreamError(resp.status_code, message, details)

        try:
            data = resp.json()
        except ValueError as e:
            raise MalformedUpstreamDataError("CWA 回應不是有效的 JSON") from e
        if not isinstance(data, dict):
            raise MalformedUpstreamDataError("CWA 回應格式不符")
        return data


def _response_body(resp: httpx.Response):
    """Parsed JSON body if possible, else the raw text."""
    try:
        return resp.json()
    except ValueError:
        return resp.text
