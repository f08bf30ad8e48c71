from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from marketplace.booking.applications.create_booking import CreateBookingService
from marketplace.booking.domain.factory import BookingDetails, BookingFactory
from marketplace.booking.handlers.request_models import CreateBookingRequest
from marketplace.booking.handlers.response_models import to_create_response
from marketplace.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from marketplace.customer.infrastructure.dynamodb_customer_repository import (
    DynamoDBCustomerRepository,
)
from marketplace.hangar.domain.exception import InvalidHangarPricingException
from marketplace.hangar.infrastructure.dynamodb_hangar_repository import (
    DynamoDBHangarRepository,
)
from marketplace.shared.domain import (
    BusinessRuleViolationException,
    ResourceNotFoundException,
)
from marketplace.shared.utils import api_response, get_caller_id

logger = Logger()

service = CreateBookingService(
    booking_repository=DynamoDBBookingRepository(),
    hangar_repository=DynamoDBHangarRepository(),
    customer_repository=DynamoDBCustomerRepository(),
    factory=BookingFactory(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """ハンガー予約作成 Lambda Handler (POST /bookings)

    ハンガー未存在は 404、料金設定不備・期間不正・入力不正は 400、
    それ以外の失敗は 500 で元のメッセージを返す。
    """

    caller_id = get_caller_id(event)
    if caller_id is None:
        return api_response(401, {"error": "Authentication required"})

    try:
        request = CreateBookingRequest.model_validate_json(event.body or "{}")
    except ValidationError as e:
        return api_response(
            400,
            {
                "error": "Invalid booking request",
                "details": e.errors(
                    include_url=False, include_context=False, include_input=False
                ),
            },
        )

    logger.info(
        "Received create booking request",
        extra={"customer_id": str(caller_id), "hangar_id": request.hangar_id},
    )

    try:
        view = service.create(caller_id, _to_booking_details(request))
    except ResourceNotFoundException:
        return api_response(404, {"error": "Hangar not found"})
    except InvalidHangarPricingException as e:
        logger.warning(
            "Hangar has invalid pricing",
            extra={"hangar_id": e.hangar_id, "current_price": str(e.current_price)},
        )
        return api_response(
            400,
            {
                "error": "Invalid hangar pricing configuration",
                "details": str(e),
                "hangarData": {
                    "id": e.hangar_id,
                    "currentPrice": (
                        str(e.current_price) if e.current_price is not None else None
                    ),
                },
            },
        )
    except BusinessRuleViolationException as e:
        return api_response(400, {"error": str(e)})
    except Exception as e:
        logger.exception("Booking creation error")
        return api_response(
            500,
            {"success": False, "message": "Error creating booking", "error": str(e)},
        )

    logger.info(
        "Booking created",
        extra={
            "booking_id": str(view.booking.id),
            "total_amount": str(view.booking.pricing.total_amount),
        },
    )
    return api_response(201, to_create_response(view))


def _to_booking_details(request: CreateBookingRequest) -> BookingDetails:
    """リクエストボディから BookingDetails を構築する"""

    return {
        "hangar_id": request.hangar_id,
        "start_date": request.start_date,
        "end_date": request.end_date,
        "aircraft_type": request.aircraft.type,
        "aircraft_registration_number": request.aircraft.registration_number,
        "aircraft_size": request.aircraft.size.value,
        "special_requests": request.special_requests,
    }
