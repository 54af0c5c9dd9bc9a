import pytest
from datetime import datetime

from studio_manager.app.core.db import init_db
from studio_manager.app.core.storage import KeyValueStore
from studio_manager.app.schemas import Booking, PaymentStatus, Service
from studio_manager.app.services import BookingStore, DataManager, ServiceStore, SettingsStore


@pytest.fixture
def db_path(tmp_path):
    """Path of a migrated SQLite file private to the test."""
    path = str(tmp_path / "studio_test.db")
    init_db(path)
    return path


@pytest.fixture
def storage(db_path):
    return KeyValueStore(db_path)


@pytest.fixture
def service_store(storage):
    return ServiceStore(storage)


@pytest.fixture
def booking_store(storage):
    return BookingStore(storage)


@pytest.fixture
def settings_store(storage):
    return SettingsStore(storage)


@pytest.fixture
def manager(storage):
    return DataManager(storage)


@pytest.fixture
def sample_service():
    return create_test_service(name='Photo Session', price=100.0)


def create_test_service(**kwargs):
    """Helper function to build a service."""
    defaults = {
        'name': 'Test Service',
        'price': 50.0,
        'duration': '1 hour',
        'notes': '',
        'category': 'Photography',
        'availability': True,
        'rating': 4.0,
    }
    defaults.update(kwargs)
    return Service(**defaults)


def create_test_booking(service=None, **kwargs):
    """Helper function to build a booking."""
    defaults = {
        'customer_name': 'Jane Doe',
        'contact_number': '555-0100',
        'email': 'jane@example.com',
        'service': service or create_test_service(),
        'date': datetime(2025, 9, 1, 10, 0),
        'notes': '',
        'special_requests': '',
        'payment_status': PaymentStatus.PENDING,
    }
    defaults.update(kwargs)
    return Booking(**defaults)
