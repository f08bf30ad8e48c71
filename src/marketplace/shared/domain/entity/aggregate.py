from datetime import datetime, timezone
from typing import TypeVar

from .entity import Entity

ID = TypeVar("ID")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AggregateRoot(Entity[ID]):
    """AggregateRoot 基底クラス

    - 配下の値オブジェクトへの変更は必ず集約ルートを経由する
    - 永続化の単位 = 集約
    - 作成日時・更新日時を保持する
    """

    def __init__(
        self,
        id: ID,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ) -> None:
        super().__init__(id)
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def _touch(self) -> None:
        """更新日時を現在時刻にする"""
        self._updated_at = utc_now()
