import logging
import os
from decimal import Decimal
from typing import Any

import httpx

from marketplace.client.session import ClientSession

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:5300/api"
DEFAULT_TIMEOUT = 10.0


class ApiError(Exception):
    """2xx 以外のレスポンス"""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class BookingApiClient:
    """ハンガー予約 API のクライアント

    再試行はしない。401 を受け取った場合はセッションを無効化してから ApiError を送出する。
    """

    def __init__(
        self,
        session: ClientSession,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._session = session
        self._client = httpx.Client(
            base_url=base_url or os.environ.get("MARKETPLACE_API_URL", DEFAULT_API_URL),
            timeout=timeout,
            headers={"Content-Type": "application/json"},
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "BookingApiClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def create_booking(self, booking: dict[str, Any]) -> dict:
        """POST /bookings"""
        return self._request(
            "POST", "/bookings", "Failed to create booking", json=booking
        )

    def list_bookings(self) -> list[dict]:
        """GET /bookings/customer"""
        return self._request("GET", "/bookings/customer", "Failed to fetch bookings")

    def get_booking(self, booking_id: str) -> dict:
        """GET /bookings/{id}"""
        return self._request(
            "GET", f"/bookings/{booking_id}", "Failed to fetch booking"
        )

    def cancel_booking(self, booking_id: str) -> dict:
        """PATCH /bookings/{id}/cancel"""
        return self._request(
            "PATCH", f"/bookings/{booking_id}/cancel", "Failed to cancel booking"
        )

    def update_hangar_price(
        self, hangar_id: str, amount: Decimal | int | str, currency: str = "USD"
    ) -> dict:
        """PATCH /bookings/{id}/price"""
        return self._request(
            "PATCH",
            f"/bookings/{hangar_id}/price",
            "Failed to update hangar price",
            json={"amount": str(amount), "currency": currency},
        )

    def _request(
        self, method: str, path: str, default_message: str, **kwargs: Any
    ) -> Any:
        logger.debug("Request %s %s", method, path)
        response = self._client.request(
            method, path, headers=self._session.auth_headers(), **kwargs
        )
        if response.is_success:
            return response.json()

        if response.status_code == httpx.codes.UNAUTHORIZED:
            self._session.invalidate()

        message = _error_message(response, default_message)
        logger.warning(
            "Request %s %s failed with %s: %s",
            method,
            path,
            response.status_code,
            message,
        )
        raise ApiError(response.status_code, message)


def _error_message(response: httpx.Response, default_message: str) -> str:
    """レスポンスボディの message、無ければ error、どちらも無ければ既定値"""
    try:
        body = response.json()
    except ValueError:
        return default_message
    if not isinstance(body, dict):
        return default_message
    return body.get("message") or body.get("error") or default_message
