from enum import Enum


class PaymentStatus(str, Enum):
    """支払いステータス（ラベルのみ。遷移は外部で行う）"""

    PENDING = "pending"
    PAID = "paid"
    REFUNDED = "refunded"
