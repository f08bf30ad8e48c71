import os

import boto3

from marketplace.customer.domain.entity import Customer
from marketplace.customer.domain.repository import CustomerRepository
from marketplace.shared.domain import CustomerId


class DynamoDBCustomerRepository(CustomerRepository):
    """DynamoDBを使用したCustomerRepository の具象実装

    プロフィールアイテムはサインアップ側が書き込む。
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def find_by_id(self, customer_id: CustomerId) -> Customer | None:
        response = self.table.get_item(
            Key={
                "PK": f"CUSTOMER#{customer_id}",
                "SK": "PROFILE",
            },
        )
        item = response.get("Item")
        if not item:
            return None
        return Customer(
            id=CustomerId(value=item["customer_id"]),
            name=item.get("name"),
            email=item.get("email"),
        )
