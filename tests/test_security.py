import pytest

from products_api.app.core.errors import AuthenticationError
from products_api.app.core.security import authenticate


def test_matching_key_passes():
    assert authenticate("secret", "secret") is None


@pytest.mark.parametrize("presented", [None, ""])
def test_missing_key(presented):
    with pytest.raises(AuthenticationError) as exc_info:
        authenticate(presented, "secret")

    assert exc_info.value.message == "API key is required"
    assert exc_info.value.status_code == 401


def test_wrong_key():
    with pytest.raises(AuthenticationError) as exc_info:
        authenticate("guess", "secret")

    assert exc_info.value.message == "Invalid API key"


def test_custom_header_name(store):
    from fastapi.testclient import TestClient

    from products_api.app.core.config import Settings
    from products_api.app.main import create_app

    app = create_app(Settings(api_key="k", api_key_header="x-products-key"), store)
    with TestClient(app) as client:
        assert client.delete("/products/1", headers={"x-api-key": "k"}).status_code == 401
        assert client.delete("/products/1", headers={"x-products-key": "k"}).status_code == 200
