from decimal import Decimal, InvalidOperation


def to_decimal(v: object) -> Decimal:
    """任意の値を Decimal に変換する

    Pydantic の field_validator (mode="before") から呼び出すことを想定。
    すでに Decimal の場合はそのまま返し、それ以外は str 経由で変換する。
    """
    if isinstance(v, Decimal):
        return v
    return Decimal(str(v))


def to_decimal_or_none(v: object) -> Decimal | None:
    """保存データ由来の値を Decimal に変換する。欠損・不正値は None"""
    if v is None or isinstance(v, bool):
        return None
    try:
        result = to_decimal(v)
    except InvalidOperation:
        return None
    return result if result.is_finite() else None
