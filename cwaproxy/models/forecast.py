"""Normalized CWA 36-hour forecast models."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ForecastEntry:
    start_time: str
    end_time: str
    weather: str = ""
    rain: str = ""  # "30%"
    min_temp: str = ""  # "18°C"
    max_temp: str = ""
    comfort: str = ""
    wind_speed: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "startTime": self.start_time,
            "endTime": self.end_time,
            "weather": self.weather,
            "rain": self.rain,
            "minTemp": self.min_temp,
            "maxTemp": self.max_temp,
            "comfort": self.comfort,
            "windSpeed": self.wind_speed,
        }


@dataclass
class ForecastResult:
    city: str  # upstream locationName, not the request token
    update_time: str
    forecasts: list[ForecastEntry] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "city": self.city,
            "updateTime": self.update_time,
            "forecasts": [f.to_dict() for f in self.forecasts],
        }
