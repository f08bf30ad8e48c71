from aws_cdk import aws_apigateway as apigw
from aws_cdk import aws_cognito as cognito
from constructs import Construct

from infra.constructs.functions import Functions


class Api(Construct):
    """API Gateway Construct

    全メソッドを Cognito オーソライザーで保護する。
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        functions: Functions,
        user_pool: cognito.IUserPool,
        allowed_origin: str,
    ) -> None:
        super().__init__(scope, id)

        self.rest_api = apigw.RestApi(
            self,
            "HangarBookingRestApi",
            rest_api_name="Hangar Booking API",
            deploy_options=apigw.StageOptions(
                stage_name="api",
                throttling_burst_limit=20,
                throttling_rate_limit=10,
            ),
            default_cors_preflight_options=apigw.CorsOptions(
                allow_origins=[allowed_origin],
                allow_methods=["GET", "POST", "PATCH", "OPTIONS"],
                allow_headers=["Content-Type", "Authorization"],
                allow_credentials=True,
            ),
        )

        authorizer = apigw.CognitoUserPoolsAuthorizer(
            self,
            "CustomerAuthorizer",
            cognito_user_pools=[user_pool],
        )

        def add_method(
            resource: apigw.IResource, http_method: str, handler
        ) -> None:
            resource.add_method(
                http_method,
                apigw.LambdaIntegration(handler),
                authorizer=authorizer,
                authorization_type=apigw.AuthorizationType.COGNITO,
            )

        # POST /bookings
        bookings = self.rest_api.root.add_resource("bookings")
        add_method(bookings, "POST", functions.create_booking)

        # GET /bookings/customer
        add_method(
            bookings.add_resource("customer"), "GET", functions.list_bookings
        )

        # GET /bookings/{id}
        booking = bookings.add_resource("{id}")
        add_method(booking, "GET", functions.get_booking)

        # PATCH /bookings/{id}/cancel
        add_method(booking.add_resource("cancel"), "PATCH", functions.cancel_booking)

        # PATCH /bookings/{id}/price （id はハンガーID）
        add_method(
            booking.add_resource("price"), "PATCH", functions.update_hangar_price
        )
