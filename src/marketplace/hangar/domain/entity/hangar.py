from datetime import datetime
from decimal import Decimal

from marketplace.hangar.domain.exception import InvalidHangarPricingException
from marketplace.hangar.domain.value_object import HangarId
from marketplace.shared.domain import AggregateRoot, Currency, Money


class Hangar(AggregateRoot[HangarId]):
    """ハンガー掲載エンティティ

    日額料金は掲載データ由来のため、欠損や 0 以下の値もそのまま保持する。
    料金として使う時点で daily_rate() が検証する。
    """

    def __init__(
        self,
        id: HangarId,
        name: str,
        location: str | None,
        price_per_day: Decimal | None,
        currency: Currency | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ) -> None:
        super().__init__(id, created_at=created_at, updated_at=updated_at)
        self._name = name
        self._location = location
        self._price_per_day = price_per_day
        self._currency = currency or Currency.usd()

    @property
    def name(self) -> str:
        return self._name

    @property
    def location(self) -> str | None:
        return self._location

    @property
    def price_per_day(self) -> Decimal | None:
        return self._price_per_day

    @property
    def currency(self) -> Currency:
        return self._currency

    def daily_rate(self) -> Money:
        """予約計算に使う日額料金を返す"""
        if self._price_per_day is None or self._price_per_day <= 0:
            raise InvalidHangarPricingException(
                hangar_id=str(self.id), current_price=self._price_per_day
            )
        return Money(amount=self._price_per_day, currency=self._currency)

    def change_price(self, price: Money) -> None:
        """日額料金を上書きする"""
        if not price.is_positive():
            raise ValueError("Hangar price must be a positive number")
        self._price_per_day = price.amount
        self._currency = price.currency
        self._touch()
