"""Swapper error classes."""


class SwapperError(Exception):
    """Base error for swap routing operations."""

    pass


class TargetInputMismatchError(SwapperError, ValueError):
    """Two paths built for different target inputs were compared."""

    pass


class ConfigError(SwapperError):
    """Configuration value could not be parsed."""

    pass


class SamplerError(SwapperError):
    """Liquidity sampler returned an inconsistent response."""

    pass
