from abc import abstractmethod

from marketplace.customer.domain.entity import Customer
from marketplace.shared.domain import CustomerId, Repository


class CustomerRepository(Repository[Customer, CustomerId]):
    """顧客プロフィールレポジトリのインターフェース（参照専用）"""

    @abstractmethod
    def find_by_id(self, customer_id: CustomerId) -> Customer | None:
        """顧客IDで検索する"""
        raise NotImplementedError
