import pytest

from top_headlines.cache import TTLCache
from top_headlines.service import NewsService

from tests.fakes import API_URL, FakeClock, FakeTransport


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_service(clock):
    def _make(*responses, ttl_seconds: float = 24 * 3600, max_entries: int = 100):
        transport = FakeTransport(*responses)
        cache = TTLCache(ttl_seconds=ttl_seconds, max_entries=max_entries, clock=clock)
        service = NewsService(base_url=API_URL, api_token="test-token", transport=transport, cache=cache)
        return service, transport

    return _make
