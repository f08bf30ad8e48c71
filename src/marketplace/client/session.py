import logging
from typing import Callable

logger = logging.getLogger(__name__)


class ClientSession:
    """API クライアントの認証セッション

    トークンを保持し、認証切れ（401）時は invalidate() でトークンを破棄して
    登録済みのコールバック（ログイン画面への遷移など）に通知する。
    """

    def __init__(
        self,
        token: str | None = None,
        on_invalidate: Callable[[], None] | None = None,
    ) -> None:
        self._token = token
        self._on_invalidate = on_invalidate

    @property
    def token(self) -> str | None:
        return self._token

    def invalidate(self) -> None:
        """トークンを破棄し、コールバックに通知する"""
        logger.info("Session invalidated")
        self._token = None
        if self._on_invalidate is not None:
            self._on_invalidate()

    def auth_headers(self) -> dict[str, str]:
        if self._token is None:
            return {}
        return {"Authorization": f"Bearer {self._token}"}
