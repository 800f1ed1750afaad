import pytest
from fastapi.testclient import TestClient

from gauth.app.core.config import get_settings
from gauth.app.main import app

# RFC 6238 Appendix B seed "12345678901234567890", canonical base32
RFC6238_SECRET = "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"


@pytest.fixture()
def rfc_secret() -> str:
    return RFC6238_SECRET


@pytest.fixture()
def client():
    get_settings.cache_clear()
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    get_settings.cache_clear()
