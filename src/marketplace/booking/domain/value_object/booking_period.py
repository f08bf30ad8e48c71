from dataclasses import dataclass
from datetime import timedelta

from marketplace.booking.domain.exception import InvalidBookingPeriodException
from marketplace.shared.domain import IsoDateTime

_ONE_DAY = timedelta(days=1)


@dataclass(frozen=True)
class BookingPeriod:
    """予約期間(開始日時 + 終了日時)"""

    start: IsoDateTime
    end: IsoDateTime

    def __post_init__(self) -> None:
        if not self.end.is_after(self.start):
            raise InvalidBookingPeriodException("End date must be after start date")

    def duration_days(self) -> int:
        """利用日数を計算する（端数の日は1日として切り上げる）"""
        days, remainder = divmod(self.end.value - self.start.value, _ONE_DAY)
        return days + 1 if remainder else days
