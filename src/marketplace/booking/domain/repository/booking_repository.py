from abc import abstractmethod

from marketplace.booking.domain.entity import Booking
from marketplace.booking.domain.enum import BookingStatus
from marketplace.booking.domain.value_object import BookingId
from marketplace.shared.domain import CustomerId, Repository


class BookingRepository(Repository[Booking, BookingId]):
    """予約レポジトリのインターフェース"""

    @abstractmethod
    def save(self, booking: Booking) -> None:
        """新規予約を保存する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_customer_id(self, customer_id: CustomerId) -> list[Booking]:
        """顧客の予約を作成日時の新しい順で返す"""
        raise NotImplementedError

    @abstractmethod
    def update(
        self, booking: Booking, expected_status: BookingStatus | None = None
    ) -> None:
        """予約のステータスを更新する"""
        raise NotImplementedError
