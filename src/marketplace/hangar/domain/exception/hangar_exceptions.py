from decimal import Decimal

from marketplace.shared.domain import InvalidConfigurationException


class InvalidHangarPricingException(InvalidConfigurationException):
    """ハンガーの日額料金が正の数でない（掲載データの不備）"""

    def __init__(self, hangar_id: str, current_price: Decimal | None) -> None:
        super().__init__("Hangar price must be a positive number")
        self.hangar_id = hangar_id
        self.current_price = current_price
