from datetime import datetime

from marketplace.booking.domain.enum import BookingStatus, PaymentStatus
from marketplace.booking.domain.value_object import (
    Aircraft,
    BookingId,
    BookingPeriod,
    Pricing,
)
from marketplace.hangar.domain.value_object import HangarId
from marketplace.shared.domain import (
    AggregateRoot,
    CustomerId,
    InvalidStateTransitionException,
)


class Booking(AggregateRoot[BookingId]):
    """ハンガー予約エンティティ"""

    def __init__(
        self,
        id: BookingId,
        hangar_id: HangarId,
        customer_id: CustomerId,
        period: BookingPeriod,
        aircraft: Aircraft,
        pricing: Pricing,
        status: BookingStatus = BookingStatus.PENDING,
        payment_status: PaymentStatus = PaymentStatus.PENDING,
        special_requests: str | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ) -> None:
        super().__init__(id, created_at=created_at, updated_at=updated_at)
        self._hangar_id = hangar_id
        self._customer_id = customer_id
        self._period = period
        self._aircraft = aircraft
        self._pricing = pricing
        self._status = status
        self._payment_status = payment_status
        self._special_requests = special_requests

    @property
    def hangar_id(self) -> HangarId:
        return self._hangar_id

    @property
    def customer_id(self) -> CustomerId:
        return self._customer_id

    @property
    def period(self) -> BookingPeriod:
        return self._period

    @property
    def aircraft(self) -> Aircraft:
        return self._aircraft

    @property
    def pricing(self) -> Pricing:
        return self._pricing

    @property
    def status(self) -> BookingStatus:
        return self._status

    @property
    def payment_status(self) -> PaymentStatus:
        return self._payment_status

    @property
    def special_requests(self) -> str | None:
        return self._special_requests

    def is_owned_by(self, customer_id: CustomerId) -> bool:
        """予約者本人かどうか"""
        return self._customer_id == customer_id

    def confirm(self) -> None:
        """予約を確定する"""
        self._transition_to(BookingStatus.CONFIRMED)

    def complete(self) -> None:
        """利用完了にする"""
        self._transition_to(BookingStatus.COMPLETED)

    def cancel(self) -> None:
        """予約をキャンセルする（キャンセル済み・完了済みは不可）"""
        self._transition_to(BookingStatus.CANCELLED)

    def _transition_to(self, status: BookingStatus) -> None:
        if not self._status.can_transition_to(status):
            raise InvalidStateTransitionException(
                f"Cannot change booking status from {self._status.value} "
                f"to {status.value}"
            )
        self._status = status
        self._touch()
