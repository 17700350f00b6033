"""Flatten a CWA F-C0032-001 document into a per-city forecast list."""

from cwaproxy.models.errors import MalformedUpstreamDataError, NoDataError
from cwaproxy.models.forecast import ForecastEntry, ForecastResult

# elementName -> (ForecastEntry attribute, display suffix)
ELEMENT_FIELDS: dict[str, tuple[str, str]] = {
    "Wx": ("weather", ""),
    "PoP": ("rain", "%"),
    "MinT": ("min_temp", "°C"),
    "MaxT": ("max_temp", "°C"),
    "CI": ("comfort", ""),
    "WS": ("wind_speed", ""),
}


def normalize_forecast(raw: dict, location_name: str) -> ForecastResult:
    """Build a ForecastResult from the raw upstream document.

    ``location_name`` is the canonical name that was requested; it only
    appears in the NoDataError message. The result's city is whatever
    upstream reports.
    """
    records = raw.get("records") or {}
    locations = records.get("location") or []
    if not locations:
        raise NoDataError(location_name)

    location = locations[0]
    elements = location.get("weatherElement") or []
    result = ForecastResult(
        city=location.get("locationName", ""),
        update_time=records.get("datasetDescription", ""),
    )
    if not elements:
        return result

    time_count = len(elements[0].get("time") or [])
    for element in elements:
        count = len(element.get("time") or [])
        if count != time_count:
            raise MalformedUpstreamDataError(
                f"{element.get('elementName', '?')} 有 {count} 個時段，"
                f"預期 {time_count} 個"
            )

    first_times = elements[0]["time"] if time_count else []
    for i in range(time_count):
        entry = ForecastEntry(
            start_time=first_times[i].get("startTime", ""),
            end_time=first_times[i].get("endTime", ""),
        )
        for element in elements:
            mapping = ELEMENT_FIELDS.get(element.get("elementName"))
            if mapping is None:
                continue
            attr, suffix = mapping
            parameter = element["time"][i].get("parameter") or {}
            setattr(entry, attr, f"{parameter.get('parameterName', '')}{suffix}")
        result.forecasts.append(entry)

    return result
