"""Forecast request handler: city token in, normalized forecast out."""

import logging

from cwaproxy.config.defaults import CITY_ALIASES
from cwaproxy.config.schema import ProxyConfig
from cwaproxy.ingest.cwa_client import CwaClient
from cwaproxy.ingest.normalizer import normalize_forecast
from cwaproxy.models.errors import (
    ConfigurationError,
    ForecastError,
    UnexpectedServerError,
    UnsupportedCityError,
)
from cwaproxy.models.forecast import ForecastResult

logger = logging.getLogger(__name__)


class ForecastRequestHandler:
    """Resolves a city token, fetches its CWA forecast and normalizes it.

    Holds only read-only state, so one instance serves concurrent requests.
    Every failure surfaces as a ForecastError subclass carrying the HTTP
    status the API layer should answer with.
    """

    def __init__(
        self,
        config: ProxyConfig,
        client: CwaClient | None = None,
        aliases: dict[str, str] | None = None,
    ):
        self.config = config
        self.client = client or CwaClient(
            api_key=config.cwa.api_key,
            base_url=config.cwa.base_url,
            dataset_id=config.cwa.dataset_id,
            timeout=config.cwa.timeout_seconds,
        )
        self.aliases = aliases if aliases is not None else CITY_ALIASES

    def resolve_city(self, city_token: str) -> str:
        """Map a case-insensitive city token to its CWA location name."""
        location_name = self.aliases.get(city_token.lower())
        if location_name is None:
            raise UnsupportedCityError(city_token)
        return location_name

    def supported_cities(self) -> dict[str, str]:
        return dict(self.aliases)

    def handle(self, city_token: str) -> ForecastResult:
        try:
            if not self.config.cwa.api_key:
                raise ConfigurationError()
            location_name = self.resolve_city(city_token)
            raw = self.client.get_forecast(location_name)
            return normalize_forecast(raw, location_name)
        except ForecastError as e:
            logger.error("取得天氣資料失敗: %s", e.message)
            raise
        except Exception as e:
            logger.error("取得天氣資料失敗: %s", e)
            raise UnexpectedServerError() from e

    def handle_default(self) -> ForecastResult:
        """Forecast for the configured default city."""
        return self.handle(self.config.default_city)
