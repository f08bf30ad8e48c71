from abc import abstractmethod

from marketplace.hangar.domain.entity import Hangar
from marketplace.hangar.domain.value_object import HangarId
from marketplace.shared.domain import Repository


class HangarRepository(Repository[Hangar, HangarId]):
    """ハンガー掲載レポジトリのインターフェース"""

    @abstractmethod
    def find_by_id(self, hangar_id: HangarId) -> Hangar | None:
        """ハンガーIDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def update_price(self, hangar: Hangar) -> None:
        """日額料金を更新する"""
        raise NotImplementedError
