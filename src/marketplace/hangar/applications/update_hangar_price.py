from marketplace.hangar.domain.entity import Hangar
from marketplace.hangar.domain.repository import HangarRepository
from marketplace.hangar.domain.value_object import HangarId
from marketplace.shared.domain import Money, ResourceNotFoundException


class UpdateHangarPriceService:
    """ハンガー日額料金の更新ユースケース"""

    def __init__(self, repository: HangarRepository) -> None:
        self._repository = repository

    def update_price(self, hangar_id: HangarId, price: Money) -> Hangar:
        """日額料金を上書きする"""
        hangar = self._repository.find_by_id(hangar_id)
        if hangar is None:
            raise ResourceNotFoundException("Hangar not found")
        hangar.change_price(price)
        self._repository.update_price(hangar)
        return hangar
