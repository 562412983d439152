"""Liquidity sampler client.

The sampler service is a network collaborator that returns token metadata,
spot prices and sampled liquidity curves. Its wire client is injected as a
SamplerService; SamplerClient adapts its responses into DexSample curves
oriented by market side. All fetching happens before routing starts.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Protocol

import structlog

from swapper.constants import DEFAULT_LIQUIDITY_SAMPLES
from swapper.decimal_utils import Amount, to_decimal
from swapper.errors import SamplerError
from swapper.models.liquidity import (
    DexSample,
    LiquidityRequest,
    PriceRequest,
    SourceLiquidity,
    TokenInfo,
)
from swapper.models.types import ERC20BridgeSource, MarketOperation

logger = structlog.get_logger()


class SamplerService(Protocol):
    """Protocol for the wire client of the sampler service."""

    async def get_chain_id(self) -> int: ...

    async def get_tokens(self, tokens: list[str]) -> list[TokenInfo]: ...

    async def get_prices(self, requests: list[PriceRequest]) -> list[Decimal]: ...

    async def get_sell_liquidity(self, requests: list[LiquidityRequest]) -> list[SourceLiquidity]: ...

    async def get_buy_liquidity(self, requests: list[LiquidityRequest]) -> list[SourceLiquidity]: ...


class Sampler(Protocol):
    """Protocol for liquidity and token metadata providers."""

    @property
    def chain_id(self) -> int: ...

    async def get_token_infos(self, tokens: list[str]) -> list[TokenInfo]: ...

    async def get_prices(
        self,
        paths: list[list[str]],
        sources: list[ERC20BridgeSource],
        demand: bool = True,
    ) -> list[Decimal]: ...

    async def get_sell_liquidity(
        self,
        path: list[str],
        taker_amount: Amount,
        sources: list[ERC20BridgeSource],
        num_samples: int = DEFAULT_LIQUIDITY_SAMPLES,
    ) -> list[list[DexSample]]: ...

    async def get_buy_liquidity(
        self,
        path: list[str],
        maker_amount: Amount,
        sources: list[ERC20BridgeSource],
        num_samples: int = DEFAULT_LIQUIDITY_SAMPLES,
    ) -> list[list[DexSample]]: ...


def liquidity_to_samples(
    side: MarketOperation,
    liquidity: Sequence[SourceLiquidity],
) -> list[list[DexSample]]:
    """Flatten per-source curves into side-oriented DexSample curves.

    Sells take the sell amount as input; buys take the buy amount. Each
    point is kept as the sample's fill data.
    """
    curves: list[list[DexSample]] = []
    for source_liquidity in liquidity:
        for points in source_liquidity.liquidity_curves:
            curves.append(
                [
                    DexSample(
                        source=source_liquidity.source,
                        input=pt.sell_amount if side == MarketOperation.SELL else pt.buy_amount,
                        output=pt.buy_amount if side == MarketOperation.SELL else pt.sell_amount,
                        encoded_fill_data=pt.encoded_fill_data,
                        metadata=pt.metadata,
                        gas_cost=pt.gas_cost,
                        fill_data=pt,
                    )
                    for pt in points
                ]
            )
    return curves


class SamplerClient:
    """Sampler backed by a SamplerService.

    Usage:
        client = await SamplerClient.create(service)
        curves = await client.get_sell_liquidity([WETH, USDC], 10**18, sources)
    """

    def __init__(self, chain_id: int, service: SamplerService) -> None:
        self._chain_id = chain_id
        self._service = service

    @classmethod
    async def create(cls, service: SamplerService) -> SamplerClient:
        """Build a client, asking the service for its chain id."""
        chain_id = await service.get_chain_id()
        return cls(chain_id, service)

    @property
    def chain_id(self) -> int:
        return self._chain_id

    async def get_token_infos(self, tokens: list[str]) -> list[TokenInfo]:
        return await self._service.get_tokens(tokens)

    async def get_prices(
        self,
        paths: list[list[str]],
        sources: list[ERC20BridgeSource],
        demand: bool = True,
    ) -> list[Decimal]:
        requests = [PriceRequest(token_path=p, demand=demand, sources=sources) for p in paths]
        return await self._service.get_prices(requests)

    async def get_sell_liquidity(
        self,
        path: list[str],
        taker_amount: Amount,
        sources: list[ERC20BridgeSource],
        num_samples: int = DEFAULT_LIQUIDITY_SAMPLES,
    ) -> list[list[DexSample]]:
        requests = self._liquidity_requests(path, taker_amount, sources, num_samples)
        liquidity = await self._service.get_sell_liquidity(requests)
        return self._to_samples(MarketOperation.SELL, requests, liquidity)

    async def get_buy_liquidity(
        self,
        path: list[str],
        maker_amount: Amount,
        sources: list[ERC20BridgeSource],
        num_samples: int = DEFAULT_LIQUIDITY_SAMPLES,
    ) -> list[list[DexSample]]:
        requests = self._liquidity_requests(path, maker_amount, sources, num_samples)
        liquidity = await self._service.get_buy_liquidity(requests)
        return self._to_samples(MarketOperation.BUY, requests, liquidity)

    @staticmethod
    def _liquidity_requests(
        path: list[str],
        amount: Amount,
        sources: list[ERC20BridgeSource],
        num_samples: int,
    ) -> list[LiquidityRequest]:
        return [
            LiquidityRequest(
                num_samples=num_samples,
                token_path=path,
                input_amount=to_decimal(amount),
                source=source,
                demand=True,
            )
            for source in sources
        ]

    def _to_samples(
        self,
        side: MarketOperation,
        requests: list[LiquidityRequest],
        liquidity: list[SourceLiquidity],
    ) -> list[list[DexSample]]:
        if len(liquidity) != len(requests):
            raise SamplerError(
                f"Sampler returned {len(liquidity)} results for {len(requests)} requests"
            )
        curves = liquidity_to_samples(side, liquidity)
        logger.debug(
            "liquidity_sampled",
            chain_id=self._chain_id,
            side=side.value,
            sources=len(requests),
            curves=len(curves),
        )
        return curves


__all__ = ["Sampler", "SamplerClient", "SamplerService", "liquidity_to_samples"]
