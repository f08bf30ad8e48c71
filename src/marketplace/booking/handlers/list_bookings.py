from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from marketplace.booking.applications.list_bookings import ListBookingsService
from marketplace.booking.handlers.response_models import to_response
from marketplace.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from marketplace.hangar.infrastructure.dynamodb_hangar_repository import (
    DynamoDBHangarRepository,
)
from marketplace.shared.utils import api_response, get_caller_id

logger = Logger()

service = ListBookingsService(
    booking_repository=DynamoDBBookingRepository(),
    hangar_repository=DynamoDBHangarRepository(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約一覧取得 Lambda Handler (GET /bookings/customer)"""

    caller_id = get_caller_id(event)
    if caller_id is None:
        return api_response(401, {"error": "Authentication required"})

    logger.info("Listing bookings", extra={"customer_id": str(caller_id)})

    try:
        views = service.list_for_customer(caller_id)
    except Exception as e:
        logger.exception("Failed to list bookings")
        return api_response(500, {"error": str(e)})

    return api_response(200, [to_response(view) for view in views])
