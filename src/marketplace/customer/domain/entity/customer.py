from marketplace.shared.domain import Entity
from marketplace.shared.domain.value_object import CustomerId


class Customer(Entity[CustomerId]):
    """顧客プロフィール（表示用の参照データ）"""

    def __init__(self, id: CustomerId, name: str | None, email: str | None) -> None:
        super().__init__(id)
        self._name = name
        self._email = email

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def email(self) -> str | None:
        return self._email
