import pytest
from fastapi.testclient import TestClient

from src.core.errors import NotifyError, StoreError
from src.main import create_app

from fakes import FakeNotifier, FakeWaitlistStore

@pytest.fixture
def store():
    return FakeWaitlistStore()

@pytest.fixture
def notifier():
    return FakeNotifier()

@pytest.fixture
def client(store, notifier):
    return TestClient(create_app(waitlist_store=store, notifier=notifier))

@pytest.fixture
def failing_store():
    return FakeWaitlistStore(error=StoreError("connection refused"))

@pytest.fixture
def failing_notifier():
    return FakeNotifier(error=NotifyError("provider rejected message"))
