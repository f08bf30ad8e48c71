from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

from infra.constructs.layers import LAMBDA_RUNTIME


class Functions(Construct):
    """Lambda 関数を管理する Construct（1ルート = 1関数）"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        table: dynamodb.Table,
        common_layer: _lambda.LayerVersion,
        allowed_origin: str,
    ) -> None:
        super().__init__(scope, id)

        self._table = table
        self._common_layer = common_layer
        self._allowed_origin = allowed_origin

        self.create_booking = self._create_function(
            "CreateBookingLambda",
            "marketplace.booking.handlers.create.lambda_handler",
            "booking-service",
        )

        self.list_bookings = self._create_function(
            "ListBookingsLambda",
            "marketplace.booking.handlers.list_bookings.lambda_handler",
            "booking-service",
        )

        self.get_booking = self._create_function(
            "GetBookingLambda",
            "marketplace.booking.handlers.get.lambda_handler",
            "booking-service",
        )

        self.cancel_booking = self._create_function(
            "CancelBookingLambda",
            "marketplace.booking.handlers.cancel.lambda_handler",
            "booking-service",
        )

        self.update_hangar_price = self._create_function(
            "UpdateHangarPriceLambda",
            "marketplace.hangar.handlers.update_price.lambda_handler",
            "hangar-service",
        )

        # 作成は予約の書き込みとハンガー・顧客の参照、一覧・詳細は参照のみ
        table.grant_read_write_data(self.create_booking)
        table.grant_read_write_data(self.cancel_booking)
        table.grant_read_write_data(self.update_hangar_price)
        table.grant_read_data(self.list_bookings)
        table.grant_read_data(self.get_booking)

    @property
    def all_functions(self) -> list[_lambda.Function]:
        return [
            self.create_booking,
            self.list_bookings,
            self.get_booking,
            self.cancel_booking,
            self.update_hangar_price,
        ]

    def _create_function(
        self, id: str, handler: str, service_name: str
    ) -> _lambda.Function:
        return _lambda.Function(
            self,
            id,
            runtime=LAMBDA_RUNTIME,
            handler=handler,
            code=_lambda.Code.from_asset("src"),
            layers=[self._common_layer],
            environment={
                "TABLE_NAME": self._table.table_name,
                "POWERTOOLS_SERVICE_NAME": service_name,
                "ALLOWED_ORIGIN": self._allowed_origin,
            },
        )
