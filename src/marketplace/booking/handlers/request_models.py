from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from marketplace.booking.domain.enum import AircraftSize


class AircraftRequest(BaseModel):
    """機体情報のリクエストモデル"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    type: str = Field(
        ...,
        min_length=1,
        pattern=r"\S",
        max_length=100,
        description="機種",
        examples=["Cessna 172"],
    )
    registration_number: str = Field(
        ...,
        min_length=1,
        pattern=r"\S",
        max_length=20,
        description="機体登録記号",
        examples=["N12345"],
    )
    size: AircraftSize = Field(..., description="機体サイズ区分")


class CreateBookingRequest(BaseModel):
    """ハンガー予約リクエストモデル

    customerId はボディに含まれていても無視する（呼び出し元はトークンから決める）。
    期間の前後関係はハンガー検証の後にドメイン側で検証する。
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "hangarId": "hangar-123",
                    "startDate": "2024-01-01T00:00:00Z",
                    "endDate": "2024-01-03T00:00:00Z",
                    "aircraft": {
                        "type": "Cessna 172",
                        "registrationNumber": "N12345",
                        "size": "small",
                    },
                    "specialRequests": "Heated hangar preferred",
                }
            ]
        },
    )

    hangar_id: str = Field(..., min_length=1, description="ハンガーID")
    start_date: datetime = Field(..., description="利用開始日時（ISO 8601形式）")
    end_date: datetime = Field(..., description="利用終了日時（ISO 8601形式）")
    aircraft: AircraftRequest
    special_requests: str | None = Field(default=None, max_length=1000)
