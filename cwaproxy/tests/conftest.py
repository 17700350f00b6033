"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from cwaproxy.config.schema import CwaConfig, ProxyConfig

TEST_BASE_URL = "https://test-cwa.example.com"

ALL_ELEMENTS = ("Wx", "PoP", "MinT", "MaxT", "CI", "WS")


def make_document(
    location_name: str = "臺北市",
    time_count: int = 2,
    elements: tuple[str, ...] = ALL_ELEMENTS,
    description: str = "三十六小時天氣預報",
) -> dict:
    """Build a synthetic F-C0032-001 document with aligned time windows."""
    windows = [
        (f"2026-10-{16 + i} 06:00:00", f"2026-10-{16 + i} 18:00:00")
        for i in range(time_count)
    ]
    return {
        "records": {
            "datasetDescription": description,
            "location": [
                {
                    "locationName": location_name,
                    "weatherElement": [
                        {
                            "elementName": name,
                            "time": [
                                {
                                    "startTime": start,
                                    "endTime": end,
                                    "parameter": {"parameterName": f"{name}-{i}"},
                                }
                                for i, (start, end) in enumerate(windows)
                            ],
                        }
                        for name in elements
                    ],
                }
            ],
        }
    }


@pytest.fixture(autouse=True)
def _no_env_api_key(monkeypatch):
    monkeypatch.delenv("CWA_API_KEY", raising=False)


@pytest.fixture
def config() -> ProxyConfig:
    """ProxyConfig pointed at the test upstream with a key set."""
    return ProxyConfig(cwa=CwaConfig(api_key="test-key", base_url=TEST_BASE_URL))


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "cwa": {"api_key": "yaml-key", "base_url": TEST_BASE_URL},
        "server": {"port": 8080},
        "default_city": "taipei",
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f, allow_unicode=True)
    return path


@pytest.fixture
def make_doc():
    return make_document


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def taipei_forecast(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "cwa_forecast_taipei.json", encoding="utf-8") as f:
        return json.load(f)
