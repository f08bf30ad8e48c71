from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from marketplace.hangar.applications.update_hangar_price import (
    UpdateHangarPriceService,
)
from marketplace.hangar.domain.value_object import HangarId
from marketplace.hangar.handlers.request_models import UpdateHangarPriceRequest
from marketplace.hangar.handlers.response_models import to_response
from marketplace.hangar.infrastructure.dynamodb_hangar_repository import (
    DynamoDBHangarRepository,
)
from marketplace.shared.domain import Currency, Money, ResourceNotFoundException
from marketplace.shared.utils import api_response, get_caller_id

logger = Logger()

repository = DynamoDBHangarRepository()
service = UpdateHangarPriceService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """ハンガー料金更新 Lambda Handler (PATCH /bookings/{id}/price)"""

    caller_id = get_caller_id(event)
    if caller_id is None:
        return api_response(401, {"error": "Authentication required"})

    hangar_id = (event.path_parameters or {}).get("id")
    if not hangar_id or not hangar_id.strip():
        return api_response(400, {"error": "Hangar id is required"})

    logger.info(
        "Received update hangar price request",
        extra={"hangar_id": hangar_id, "customer_id": str(caller_id)},
    )

    try:
        request = UpdateHangarPriceRequest.model_validate_json(event.body or "{}")
        price = Money(amount=request.amount, currency=Currency(request.currency))
        hangar = service.update_price(HangarId(value=hangar_id), price)
    except (ValidationError, ValueError) as e:
        return api_response(400, {"error": "Invalid price", "details": str(e)})
    except ResourceNotFoundException:
        return api_response(404, {"error": "Hangar not found"})
    except Exception as e:
        logger.exception("Failed to update hangar price")
        return api_response(500, {"error": str(e)})

    return api_response(200, to_response(hangar))
