"""
Configuración de pytest para tests
"""
import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from shareit.clock import FixedClock, get_clock
from shareit.db import create_indexes, get_db
from shareit.repositories.bookings import BookingRepository
from shareit.repositories.comments import CommentRepository
from shareit.repositories.items import ItemRepository
from shareit.repositories.requests import ItemRequestRepository
from shareit.repositories.users import UserRepository
from shareit.services.bookings import BookingService
from shareit.services.comments import CommentService
from shareit.services.items import ItemService
from shareit.services.requests import ItemRequestService
from shareit.services.users import UserService
from common import NOW

TEST_DB_NAME = "shareit_test"

# Deshabilitar rate limiting en la app antes de usarla
@pytest.fixture(scope="session", autouse=True)
def disable_rate_limiting():
    """Deshabilita rate limiting para todos los tests"""
    from shareit.main import app
    app.state.limiter = None

@pytest.fixture
async def test_db():
    """Base de datos Mongo en memoria, nueva y con índices para cada test"""
    client = AsyncMongoMockClient(tz_aware=True)
    db = client[TEST_DB_NAME]
    await create_indexes(db)
    yield db
    await client.drop_database(TEST_DB_NAME)

@pytest.fixture
def clock():
    return FixedClock(NOW)

@pytest.fixture
def repos(test_db):
    return {
        "users": UserRepository(test_db),
        "items": ItemRepository(test_db),
        "bookings": BookingRepository(test_db),
        "comments": CommentRepository(test_db),
        "requests": ItemRequestRepository(test_db),
    }

@pytest.fixture
def user_service(repos):
    return UserService(repos["users"], repos["items"], repos["bookings"])

@pytest.fixture
def booking_service(repos, clock):
    return BookingService(repos["bookings"], repos["items"], repos["users"], clock)

@pytest.fixture
def item_service(repos, clock):
    return ItemService(repos["items"], repos["users"], repos["bookings"],
                       repos["comments"], repos["requests"], clock)

@pytest.fixture
def comment_service(repos, clock):
    return CommentService(repos["comments"], repos["bookings"], repos["items"], repos["users"], clock)

@pytest.fixture
def request_service(repos, clock):
    return ItemRequestService(repos["requests"], repos["items"], repos["users"], clock)

@pytest.fixture
def app(test_db, clock):
    """App sobre la base de datos de test y con reloj fijo"""
    from shareit.main import app
    app.state.limiter = None
    app.dependency_overrides[get_db] = lambda: test_db
    app.dependency_overrides[get_clock] = lambda: clock
    yield app
    app.dependency_overrides.clear()

@pytest.fixture
def client(app):
    """Fixture para cliente de test de FastAPI"""
    return TestClient(app)
