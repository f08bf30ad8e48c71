from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from marketplace.hangar.domain.entity import Hangar


class HangarData(BaseModel):
    """ハンガー掲載データのレスポンスモデル"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    location: str | None
    price_per_day: str | None
    currency: str
    updated_at: str


def to_response(hangar: Hangar) -> dict:
    """Hangar エンティティをレスポンス辞書に変換する"""
    return HangarData(
        id=str(hangar.id),
        name=hangar.name,
        location=hangar.location,
        price_per_day=(
            str(hangar.price_per_day) if hangar.price_per_day is not None else None
        ),
        currency=str(hangar.currency),
        updated_at=hangar.updated_at.isoformat(),
    ).model_dump(by_alias=True)
