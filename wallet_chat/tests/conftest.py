import pytest

from fakes import BASE_URL, FakeHttp, make_secret_key
from wallet_chat.batch.config import BatchConfig


@pytest.fixture
def fake_http(monkeypatch) -> FakeHttp:
    fake = FakeHttp()
    monkeypatch.setattr("httpx.Client", fake.client_factory())
    return fake


@pytest.fixture
def cfg() -> BatchConfig:
    return BatchConfig(base_url=BASE_URL, model_id="emu_otori", query_count=10, http_timeout=1.0)


@pytest.fixture
def secret_key() -> str:
    return make_secret_key(bytes(range(32)))
