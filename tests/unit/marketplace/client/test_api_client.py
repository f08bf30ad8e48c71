import json
from unittest.mock import MagicMock

import httpx
import pytest

from marketplace.client import ApiError, BookingApiClient, ClientSession

BASE_URL = "https://api.example.test/api"


@pytest.fixture
def create_client():
    """MockTransport で応答を差し替えた BookingApiClient を生成する Factory fixture"""

    def _factory(handler, session: ClientSession | None = None) -> BookingApiClient:
        return BookingApiClient(
            session=session or ClientSession(token="id-token"),
            base_url=BASE_URL,
            transport=httpx.MockTransport(handler),
        )

    return _factory


class TestBookingApiClient:
    def test_create_booking_sends_token_and_body(self, create_client):
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(201, json={"success": True, "booking": {"id": "b1"}})

        with create_client(handler) as client:
            result = client.create_booking({"hangarId": "hangar-123"})

        assert result["booking"]["id"] == "b1"
        request = requests[0]
        assert request.method == "POST"
        assert request.url.path == "/api/bookings"
        assert request.headers["Authorization"] == "Bearer id-token"
        assert json.loads(request.content) == {"hangarId": "hangar-123"}

    def test_list_bookings(self, create_client):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/api/bookings/customer"
            return httpx.Response(200, json=[{"id": "b1"}, {"id": "b2"}])

        with create_client(handler) as client:
            assert [b["id"] for b in client.list_bookings()] == ["b1", "b2"]

    def test_cancel_booking(self, create_client):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "PATCH"
            assert request.url.path == "/api/bookings/b1/cancel"
            return httpx.Response(200, json={"id": "b1", "status": "cancelled"})

        with create_client(handler) as client:
            assert client.cancel_booking("b1")["status"] == "cancelled"

    def test_update_hangar_price_sends_decimal_string(self, create_client):
        bodies: list[dict] = []

        def handler(request: httpx.Request) -> httpx.Response:
            bodies.append(json.loads(request.content))
            return httpx.Response(200, json={"id": "hangar-123", "pricePerDay": "150"})

        with create_client(handler) as client:
            client.update_hangar_price("hangar-123", 150)

        assert bodies == [{"amount": "150", "currency": "USD"}]

    def test_no_token_sends_no_authorization(self, create_client):
        def handler(request: httpx.Request) -> httpx.Response:
            assert "Authorization" not in request.headers
            return httpx.Response(200, json=[])

        with create_client(handler, session=ClientSession()) as client:
            client.list_bookings()

    def test_unauthorized_invalidates_session(self, create_client):
        on_invalidate = MagicMock()
        session = ClientSession(token="expired", on_invalidate=on_invalidate)

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, json={"message": "Unauthorized"})

        with create_client(handler, session=session) as client:
            with pytest.raises(ApiError) as exc_info:
                client.get_booking("b1")

        assert exc_info.value.status_code == 401
        assert exc_info.value.message == "Unauthorized"
        assert session.token is None
        on_invalidate.assert_called_once_with()

    @pytest.mark.parametrize(
        "response,expected",
        [
            (httpx.Response(404, json={"error": "Booking not found"}), "Booking not found"),
            (
                httpx.Response(500, json={"message": "Error creating booking", "error": "x"}),
                "Error creating booking",
            ),
            (httpx.Response(502, text="Bad Gateway"), "Failed to fetch booking"),
        ],
    )
    def test_error_message(self, create_client, response, expected):
        session = ClientSession(token="id-token")

        with create_client(lambda request: response, session=session) as client:
            with pytest.raises(ApiError) as exc_info:
                client.get_booking("b1")

        assert exc_info.value.message == expected
        assert session.token == "id-token"

    def test_base_url_from_environment(self, monkeypatch):
        monkeypatch.setenv("MARKETPLACE_API_URL", "https://env.example.test/api")
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            return httpx.Response(200, json=[])

        with BookingApiClient(
            session=ClientSession(), transport=httpx.MockTransport(handler)
        ) as client:
            client.list_bookings()

        assert seen == ["https://env.example.test/api/bookings/customer"]
