from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent

from marketplace.shared.domain import CustomerId


def get_caller_id(event: APIGatewayProxyEvent) -> CustomerId | None:
    """Cognito オーソライザーが検証したクレームから呼び出し元の顧客IDを取り出す

    リクエストボディの値は使わない。クレームが無い場合は None。
    """
    request_context = event.get("requestContext") or {}
    authorizer = request_context.get("authorizer") or {}
    claims = authorizer.get("claims") or {}
    sub = claims.get("sub")
    if not sub:
        return None
    return CustomerId(value=sub)
