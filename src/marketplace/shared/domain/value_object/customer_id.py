from dataclasses import dataclass


@dataclass(frozen=True)
class CustomerId:
    """顧客ID（認証済みの呼び出し元を表す。全コンテキスト共通）

    クライアントから送られた値ではなく、認可済みトークンのクレームから生成する。
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("CustomerId cannot be empty")

    def __str__(self) -> str:
        return self.value
