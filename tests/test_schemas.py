import json
import pytest
from datetime import datetime, timedelta, timezone
from uuid import UUID

from pydantic import TypeAdapter, ValidationError

from studio_manager.app.core.storage import decode, encode
from studio_manager.app.schemas import (
    Booking,
    BookingSortOption,
    PaymentStatus,
    Service,
    ServiceSortOption,
    Settings,
    SortOrder,
)
from tests.conftest import create_test_booking, create_test_service


class TestService:
    """Test Service model."""

    def test_generates_unique_ids(self):
        first = create_test_service()
        second = create_test_service()

        assert isinstance(first.id, UUID)
        assert first.id != second.id

    def test_defaults(self):
        service = Service(name='Album', price=50)

        assert service.price == 50.0
        assert service.duration == ''
        assert service.availability is True
        assert service.rating == 3.0

    def test_rejects_empty_name(self):
        with pytest.raises(ValidationError):
            Service(name='', price=10)

    def test_rejects_negative_price(self):
        with pytest.raises(ValidationError):
            Service(name='Album', price=-1)

    @pytest.mark.parametrize('rating', [0.9, 5.1])
    def test_rejects_rating_out_of_range(self, rating):
        with pytest.raises(ValidationError):
            Service(name='Album', price=10, rating=rating)

    @pytest.mark.parametrize('field', ['price', 'rating'])
    @pytest.mark.parametrize('value', [float('inf'), float('nan')])
    def test_rejects_non_finite_numbers(self, field, value):
        with pytest.raises(ValidationError):
            create_test_service(**{field: value})

    def test_is_immutable(self):
        service = create_test_service()

        with pytest.raises(ValidationError):
            service.price = 10.0

    def test_accepts_any_category(self):
        service = create_test_service(category='Drone Footage')

        assert service.category == 'Drone Footage'

    def test_round_trip(self):
        adapter = TypeAdapter(Service)
        service = create_test_service(notes='bring tripod', rating=4.7)

        restored = decode(adapter, encode(adapter, service))

        assert restored.model_dump() == service.model_dump()


class TestBooking:
    """Test Booking model."""

    def test_equality_uses_id_only(self):
        booking = create_test_booking()
        edited = booking.model_copy(update={'customer_name': 'Someone Else'})
        other = create_test_booking()

        assert booking == edited
        assert booking != other
        assert hash(booking) == hash(edited)

    def test_embedded_service_is_a_copy(self):
        service = create_test_service(price=100.0)
        booking = create_test_booking(service=service)

        assert booking.service is not service
        assert booking.service.model_dump() == service.model_dump()

    def test_is_immutable(self):
        booking = create_test_booking()

        with pytest.raises(ValidationError):
            booking.payment_status = PaymentStatus.PAID
        with pytest.raises(ValidationError):
            booking.service.price = 999.0

    def test_aware_date_stored_as_naive_utc(self):
        local = timezone(timedelta(hours=3))
        booking = create_test_booking(date=datetime(2025, 9, 1, 12, 0, tzinfo=local))

        assert booking.date == datetime(2025, 9, 1, 9, 0)
        assert booking.date.tzinfo is None

    def test_aware_date_string_is_normalized(self):
        booking = Booking.model_validate({
            'customerName': 'Ann',
            'service': create_test_service().model_dump(by_alias=True),
            'date': '2025-09-01T10:00:00Z',
        })

        assert booking.date == datetime(2025, 9, 1, 10, 0)

    def test_round_trip(self):
        adapter = TypeAdapter(Booking)
        booking = create_test_booking(
            date=datetime(2025, 10, 3, 14, 30, 15),
            special_requests='outdoor shots',
            payment_status=PaymentStatus.OVERDUE,
        )

        restored = decode(adapter, encode(adapter, booking))

        assert restored.model_dump() == booking.model_dump()

    def test_encodes_camel_case_fields(self):
        booking = create_test_booking(payment_status=PaymentStatus.PAID)

        data = json.loads(encode(TypeAdapter(Booking), booking))

        assert data['customerName'] == 'Jane Doe'
        assert data['contactNumber'] == '555-0100'
        assert data['specialRequests'] == ''
        assert data['paymentStatus'] == 'Paid'
        assert data['service']['name'] == 'Test Service'

    def test_accepts_camel_case_input(self):
        booking = Booking.model_validate({
            'customerName': 'Ann',
            'service': create_test_service().model_dump(by_alias=True),
            'date': '2025-09-01T10:00:00',
            'paymentStatus': 'Overdue',
        })

        assert booking.customer_name == 'Ann'
        assert booking.payment_status == PaymentStatus.OVERDUE


class TestSettings:
    """Test Settings model."""

    def test_is_immutable(self):
        settings = Settings()

        with pytest.raises(ValidationError):
            settings.is_dark_mode = True

    def test_defaults(self):
        settings = Settings()

        assert settings.is_dark_mode is False
        assert settings.service_sort_option == ServiceSortOption.NAME
        assert settings.booking_sort_option == BookingSortOption.DATE
        assert settings.sort_order == SortOrder.ASCENDING

    def test_round_trip(self):
        adapter = TypeAdapter(Settings)
        settings = Settings(
            is_dark_mode=True,
            service_sort_option=ServiceSortOption.PRICE,
            booking_sort_option=BookingSortOption.CUSTOMER_NAME,
            sort_order=SortOrder.DESCENDING,
        )

        assert decode(adapter, encode(adapter, settings)).model_dump() == settings.model_dump()

    def test_persisted_labels(self):
        data = json.loads(encode(TypeAdapter(Settings), Settings()))

        assert data == {
            'isDarkMode': False,
            'serviceSortOption': 'Name',
            'bookingSortOption': 'Date',
            'sortOrder': 'Ascending',
        }
