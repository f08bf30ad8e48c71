import json
import os

DEFAULT_ALLOWED_ORIGIN = "http://localhost:3000"


def api_response(status_code: int, body: dict | list) -> dict:
    """API Gateway Lambda Proxy Integration のレスポンス形式を生成する"""
    return {
        "statusCode": status_code,
        "headers": {
            "Content-Type": "application/json",
            "Access-Control-Allow-Origin": os.getenv(
                "ALLOWED_ORIGIN", DEFAULT_ALLOWED_ORIGIN
            ),
            "Access-Control-Allow-Credentials": "true",
        },
        "body": json.dumps(body, default=str),
    }
