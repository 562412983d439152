"""Tests for router configuration."""

import pytest

from swapper.config import RouterConfig
from swapper.errors import ConfigError


class TestRouterConfigFromEnv:
    def test_defaults(self) -> None:
        config = RouterConfig.from_env({})
        assert config == RouterConfig()
        assert config.num_samples == 16
        assert config.filter_negative_adjusted_rate_orders is True

    def test_reads_variables(self) -> None:
        config = RouterConfig.from_env(
            {
                "SWAPPER_NUM_SAMPLES": "8",
                "SWAPPER_FILTER_NEGATIVE_RATE": "no",
                "SWAPPER_NATIVE_ORDER_GAS": "100000",
                "SWAPPER_HOST": "127.0.0.1",
                "SWAPPER_PORT": "9000",
                "SWAPPER_DEBUG": "TRUE",
            }
        )
        assert config.num_samples == 8
        assert config.filter_negative_adjusted_rate_orders is False
        assert config.native_order_gas == 100_000
        assert config.host == "127.0.0.1"
        assert config.port == 9000
        assert config.debug is True

    def test_invalid_integer(self) -> None:
        with pytest.raises(ConfigError, match="SWAPPER_PORT"):
            RouterConfig.from_env({"SWAPPER_PORT": "eighty"})

    def test_negative_integer(self) -> None:
        with pytest.raises(ConfigError, match="cannot be negative"):
            RouterConfig.from_env({"SWAPPER_NUM_SAMPLES": "-1"})

    def test_invalid_boolean(self) -> None:
        with pytest.raises(ConfigError, match="SWAPPER_DEBUG"):
            RouterConfig.from_env({"SWAPPER_DEBUG": "maybe"})
