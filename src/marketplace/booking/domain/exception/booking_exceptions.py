from marketplace.shared.domain import BusinessRuleViolationException


class InvalidBookingPeriodException(BusinessRuleViolationException):
    """予約期間が不正（終了日時が開始日時以前）"""

    pass
