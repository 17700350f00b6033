"""Error taxonomy for forecast requests.

Each error carries the HTTP status it maps to, a short label for the
``error`` field of the response envelope, and a user-facing message.
"""

from typing import Any

GENERIC_FETCH_MESSAGE = "無法取得天氣資料"
RETRY_LATER_MESSAGE = "無法取得天氣資料，請稍後再試"


class ForecastError(Exception):
    status_code: int = 500
    label: str = "伺服器錯誤"

    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.label, "message": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class ConfigurationError(ForecastError):
    """Raised when no CWA API key is configured."""

    status_code = 500
    label = "伺服器設定錯誤"

    def __init__(self, message: str = "請在環境變數或設定檔中設定 CWA_API_KEY"):
        super().__init__(message)


class UnsupportedCityError(ForecastError):
    status_code = 400
    label = "不支援的城市"

    def __init__(self, city_token: str):
        super().__init__(f"不支援的城市: {city_token}")
        self.city_token = city_token


class NoDataError(ForecastError):
    status_code = 404
    label = "查無資料"

    def __init__(self, location_name: str):
        super().__init__(f"無法取得{location_name}天氣資料")
        self.location_name = location_name


class UpstreamError(ForecastError):
    """Raised when CWA answers with a non-2xx status; the status is forwarded."""

    label = "CWA API 錯誤"

    def __init__(self, status_code: int, message: str, details: Any = None):
        super().__init__(message, details)
        self.status_code = status_code


class NetworkError(ForecastError):
    """Raised when the outbound call produced no response at all."""

    status_code = 500
    label = "伺服器錯誤"

    def __init__(self, message: str = RETRY_LATER_MESSAGE):
        super().__init__(message)


class MalformedUpstreamDataError(ForecastError):
    status_code = 502
    label = "CWA 資料格式錯誤"


class UnexpectedServerError(ForecastError):
    """Any other failure while serving a request, answered as a generic 500."""

    status_code = 500
    label = "伺服器錯誤"

    def __init__(self, message: str = RETRY_LATER_MESSAGE):
        super().__init__(message)
