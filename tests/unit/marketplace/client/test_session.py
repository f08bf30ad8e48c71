from unittest.mock import MagicMock

from marketplace.client import ClientSession


class TestClientSession:
    def test_auth_headers(self):
        session = ClientSession(token="id-token")
        assert session.auth_headers() == {"Authorization": "Bearer id-token"}

    def test_no_token_sends_no_header(self):
        assert ClientSession().auth_headers() == {}

    def test_invalidate_clears_token_and_notifies(self):
        on_invalidate = MagicMock()
        session = ClientSession(token="id-token", on_invalidate=on_invalidate)

        session.invalidate()

        assert session.token is None
        assert session.auth_headers() == {}
        on_invalidate.assert_called_once_with()

    def test_invalidate_without_callback(self):
        session = ClientSession(token="id-token")
        session.invalidate()
        assert session.token is None
