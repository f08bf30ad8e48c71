from decimal import Decimal

import pytest

from marketplace.hangar.domain.exception import InvalidHangarPricingException
from marketplace.shared.domain import Currency, InvalidConfigurationException, Money


class TestHangar:
    def test_daily_rate(self, create_hangar):
        hangar = create_hangar(price_per_day=Decimal("100"))
        assert hangar.daily_rate() == Money.usd(Decimal("100"))

    @pytest.mark.parametrize("price", [Decimal("0"), Decimal("-10"), None])
    def test_daily_rate_rejects_non_positive_or_missing_price(self, create_hangar, price):
        """掲載データの料金が不正な場合は InvalidConfiguration 系の例外"""
        hangar = create_hangar(hangar_id="hangar-bad", price_per_day=price)

        with pytest.raises(InvalidHangarPricingException) as exc_info:
            hangar.daily_rate()

        assert isinstance(exc_info.value, InvalidConfigurationException)
        assert exc_info.value.hangar_id == "hangar-bad"
        assert exc_info.value.current_price == price
        assert str(exc_info.value) == "Hangar price must be a positive number"

    def test_change_price(self, create_hangar):
        hangar = create_hangar()
        before = hangar.updated_at

        hangar.change_price(Money(amount=Decimal("80"), currency=Currency("EUR")))

        assert hangar.price_per_day == Decimal("80")
        assert hangar.currency == Currency("EUR")
        assert hangar.updated_at >= before

    def test_change_price_rejects_zero(self, create_hangar):
        hangar = create_hangar()
        with pytest.raises(ValueError, match="Hangar price must be a positive number"):
            hangar.change_price(Money.usd(0))
