from __future__ import annotations

from dataclasses import dataclass

from marketplace.shared.domain import Money

from .booking_period import BookingPeriod


@dataclass(frozen=True)
class Pricing:
    """料金スナップショット

    予約作成時に一度だけ計算し、以降ハンガー側の料金が変わっても再計算しない。
    """

    price_per_day: Money
    duration_days: int
    total_amount: Money

    def __post_init__(self) -> None:
        if self.duration_days < 1:
            raise ValueError("Duration must be at least one day")
        if self.total_amount != self.price_per_day.multiply(self.duration_days):
            raise ValueError("Total amount must equal price per day times duration")

    @classmethod
    def calculate(cls, price_per_day: Money, period: BookingPeriod) -> Pricing:
        """日額料金と予約期間から料金を計算する"""
        duration_days = period.duration_days()
        return cls(
            price_per_day=price_per_day,
            duration_days=duration_days,
            total_amount=price_per_day.multiply(duration_days),
        )
