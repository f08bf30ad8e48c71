from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from marketplace.booking.applications.get_booking import GetBookingService
from marketplace.booking.domain.value_object import BookingId
from marketplace.booking.handlers.response_models import to_response
from marketplace.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from marketplace.hangar.infrastructure.dynamodb_hangar_repository import (
    DynamoDBHangarRepository,
)
from marketplace.shared.domain import ResourceNotFoundException
from marketplace.shared.utils import api_response, get_caller_id

logger = Logger()

service = GetBookingService(
    booking_repository=DynamoDBBookingRepository(),
    hangar_repository=DynamoDBHangarRepository(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約詳細取得 Lambda Handler (GET /bookings/{id})"""

    caller_id = get_caller_id(event)
    if caller_id is None:
        return api_response(401, {"error": "Authentication required"})

    booking_id = (event.path_parameters or {}).get("id")
    if not booking_id or not booking_id.strip():
        return api_response(404, {"error": "Booking not found"})

    logger.info(
        "Fetching booking",
        extra={"booking_id": booking_id, "customer_id": str(caller_id)},
    )

    try:
        view = service.get(caller_id, BookingId(value=booking_id))
    except ResourceNotFoundException:
        return api_response(404, {"error": "Booking not found"})
    except Exception as e:
        logger.exception("Failed to fetch booking")
        return api_response(500, {"error": str(e)})

    return api_response(200, to_response(view))
