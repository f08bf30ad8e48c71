from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from marketplace.booking.applications.cancel_booking import CancelBookingService
from marketplace.booking.domain.value_object import BookingId
from marketplace.booking.handlers.response_models import booking_to_response
from marketplace.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from marketplace.shared.domain import (
    InvalidStateTransitionException,
    OptimisticLockException,
    ResourceNotFoundException,
)
from marketplace.shared.utils import api_response, get_caller_id

logger = Logger()

repository = DynamoDBBookingRepository()
service = CancelBookingService(repository=repository)

NOT_CANCELLABLE_MESSAGE = "Booking not found or cannot be cancelled"


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約キャンセル Lambda Handler (PATCH /bookings/{id}/cancel)

    未存在・他人の予約・終端ステータスは区別せず同じ 404 を返す。
    """

    caller_id = get_caller_id(event)
    if caller_id is None:
        return api_response(401, {"error": "Authentication required"})

    booking_id = (event.path_parameters or {}).get("id")
    if not booking_id or not booking_id.strip():
        return api_response(404, {"error": NOT_CANCELLABLE_MESSAGE})

    logger.info(
        "Received cancel booking request",
        extra={"booking_id": booking_id, "customer_id": str(caller_id)},
    )

    try:
        booking = service.cancel(caller_id, BookingId(value=booking_id))
    except ResourceNotFoundException:
        logger.info("Booking not found", extra={"booking_id": booking_id})
        return api_response(404, {"error": NOT_CANCELLABLE_MESSAGE})
    except (InvalidStateTransitionException, OptimisticLockException) as e:
        logger.info(
            "Booking cannot be cancelled",
            extra={"booking_id": booking_id, "reason": str(e)},
        )
        return api_response(404, {"error": NOT_CANCELLABLE_MESSAGE})
    except Exception as e:
        logger.exception("Failed to cancel booking")
        return api_response(500, {"error": str(e)})

    return api_response(200, booking_to_response(booking))
