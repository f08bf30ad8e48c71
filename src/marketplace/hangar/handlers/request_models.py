from decimal import Decimal, InvalidOperation

from pydantic import BaseModel, Field, field_validator

from marketplace.shared.utils import to_decimal


class UpdateHangarPriceRequest(BaseModel):
    """ハンガー料金更新リクエストモデル"""

    amount: Decimal = Field(
        ...,
        gt=0,
        description="日額料金（0より大きい値）",
        examples=[100],
    )
    currency: str = Field(
        default="USD",
        pattern="^[A-Za-z]{3}$",
        description="通貨コード（ISO 4217）",
        examples=["USD"],
    )

    @field_validator("amount", mode="before")
    @classmethod
    def convert_amount_to_decimal(cls, v: object) -> Decimal:
        try:
            return to_decimal(v)
        except InvalidOperation:
            raise ValueError("amount must be a number")
