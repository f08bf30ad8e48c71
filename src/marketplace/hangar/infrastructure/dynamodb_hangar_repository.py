import os
from datetime import datetime

import boto3
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import ClientError

from marketplace.hangar.domain.entity import Hangar
from marketplace.hangar.domain.repository import HangarRepository
from marketplace.hangar.domain.value_object import HangarId
from marketplace.shared.domain import Currency, ResourceNotFoundException
from marketplace.shared.utils import to_decimal_or_none


class DynamoDBHangarRepository(HangarRepository):
    """DynamoDBを使用したHangarRepository の具象実装

    ハンガー掲載アイテムは掲載管理側が書き込む。ここでは参照と料金更新のみ行う。
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def find_by_id(self, hangar_id: HangarId) -> Hangar | None:
        """ハンガーIDで検索"""
        response = self.table.get_item(
            Key={
                "PK": f"HANGAR#{hangar_id}",
                "SK": "METADATA",
            },
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def update_price(self, hangar: Hangar) -> None:
        """日額料金と通貨を上書きする"""
        try:
            self.table.update_item(
                Key={
                    "PK": f"HANGAR#{hangar.id}",
                    "SK": "METADATA",
                },
                UpdateExpression=(
                    "SET price_per_day = :price, price_currency = :currency, "
                    "updated_at = :updated_at"
                ),
                ExpressionAttributeValues={
                    ":price": str(hangar.price_per_day),
                    ":currency": str(hangar.currency),
                    ":updated_at": hangar.updated_at.isoformat(),
                },
                ConditionExpression=Attr("PK").exists(),
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise ResourceNotFoundException(f"Hangar not found: {hangar.id}")
            raise

    def _to_entity(self, item: dict) -> Hangar:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        currency = item.get("price_currency")
        return Hangar(
            id=HangarId(value=item["hangar_id"]),
            name=item["name"],
            location=item.get("location"),
            price_per_day=to_decimal_or_none(item.get("price_per_day")),
            currency=Currency(currency) if currency else None,
            created_at=_parse_timestamp(item.get("created_at")),
            updated_at=_parse_timestamp(item.get("updated_at")),
        )


def _parse_timestamp(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None
