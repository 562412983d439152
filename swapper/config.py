"""Configuration for the swap router."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from swapper.constants import DEFAULT_LIQUIDITY_SAMPLES
from swapper.errors import ConfigError

_TRUE_VALUES = ("true", "1", "yes")
_FALSE_VALUES = ("false", "0", "no")


@dataclass(frozen=True)
class RouterConfig:
    """Centralized configuration for routing and the API server.

    Attributes:
        num_samples: Points sampled along each liquidity curve (default: 16)
        filter_negative_adjusted_rate_orders: Drop native orders whose
            adjusted rate is <= 0 (default: True)
        native_order_gas: Gas charged per native order fill (default: 0)
        host: Host the API binds to
        port: Port the API binds to
        debug: Enable reload mode and console logging
    """

    num_samples: int = DEFAULT_LIQUIDITY_SAMPLES
    filter_negative_adjusted_rate_orders: bool = True
    native_order_gas: int = 0
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> RouterConfig:
        """Load configuration from SWAPPER_* environment variables.

        Raises:
            ConfigError: If a variable cannot be parsed
        """
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            num_samples=_parse_int(env, "SWAPPER_NUM_SAMPLES", defaults.num_samples),
            filter_negative_adjusted_rate_orders=_parse_bool(
                env, "SWAPPER_FILTER_NEGATIVE_RATE", defaults.filter_negative_adjusted_rate_orders
            ),
            native_order_gas=_parse_int(env, "SWAPPER_NATIVE_ORDER_GAS", defaults.native_order_gas),
            host=env.get("SWAPPER_HOST", defaults.host),
            port=_parse_int(env, "SWAPPER_PORT", defaults.port),
            debug=_parse_bool(env, "SWAPPER_DEBUG", defaults.debug),
        )


def _parse_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError as err:
        raise ConfigError(f"{name} must be an integer, got '{raw}'") from err
    if value < 0:
        raise ConfigError(f"{name} cannot be negative: {value}")
    return value


def _parse_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    lowered = raw.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean, got '{raw}'")


DEFAULT_ROUTER_CONFIG = RouterConfig()
