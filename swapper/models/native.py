"""Pydantic models for native (off-chain signed) orders."""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field

from swapper.models.types import Address, FillType


class NativeOrderFields(BaseModel):
    """The signed order payload of a limit or RFQ order."""

    maker_token: Address = Field(alias="makerToken")
    taker_token: Address = Field(alias="takerToken")
    maker_amount: Decimal = Field(alias="makerAmount", ge=0)
    taker_amount: Decimal = Field(alias="takerAmount", ge=0)
    taker_token_fee_amount: Decimal = Field(default=Decimal(0), alias="takerTokenFeeAmount", ge=0)
    maker: Address | None = None
    taker: Address | None = None
    pool: str | None = None
    expiry: int | None = None
    salt: str | None = None

    model_config = {"populate_by_name": True, "extra": "allow"}


class NativeOrderWithFillableAmounts(BaseModel):
    """A native order annotated with the amounts still fillable on-chain."""

    type: FillType = FillType.LIMIT
    order: NativeOrderFields
    signature: dict[str, Any] | None = None
    fillable_taker_amount: Decimal = Field(alias="fillableTakerAmount", ge=0)
    fillable_maker_amount: Decimal = Field(alias="fillableMakerAmount", ge=0)
    fillable_taker_fee_amount: Decimal = Field(
        default=Decimal(0), alias="fillableTakerFeeAmount", ge=0
    )

    model_config = {"populate_by_name": True}

    @property
    def is_rfq(self) -> bool:
        """Return True if this is an RFQ order."""
        return self.type == FillType.RFQ


__all__ = ["NativeOrderFields", "NativeOrderWithFillableAmounts"]
