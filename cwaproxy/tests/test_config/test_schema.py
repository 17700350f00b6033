"""Tests for config schema validation."""

import pytest
from pydantic import ValidationError

from cwaproxy.config.schema import CwaConfig, ProxyConfig, ServerConfig


class TestProxyConfig:
    def test_defaults(self):
        config = ProxyConfig()
        assert config.cwa.api_key == ""
        assert config.cwa.base_url == "https://opendata.cwa.gov.tw/api"
        assert config.cwa.dataset_id == "F-C0032-001"
        assert config.server.port == 3000
        assert config.default_city == "kaohsiung"

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            ProxyConfig(unknown_field="bad")

    def test_nested_extra_fields_rejected(self):
        with pytest.raises(ValidationError):
            ProxyConfig(cwa={"api_key": "k", "retries": 3})


class TestCwaConfig:
    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            CwaConfig(timeout_seconds=0)


class TestServerConfig:
    def test_port_range(self):
        with pytest.raises(ValidationError):
            ServerConfig(port=70000)
