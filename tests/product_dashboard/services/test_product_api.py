from __future__ import annotations

import pytest
import requests

from product_dashboard.core.exceptions import ApiResponseError, ApiStatusError, ApiTransportError
from product_dashboard.core.product import ProductPayload
from product_dashboard.services.product_api import ProductApi

BASE = "https://api.example/v1/products"


class _StubResponse:
    def __init__(self, status_code=200, body=None, reason="OK", json_error=False):
        self.status_code = status_code
        self._body = body
        self.reason = reason
        self._json_error = json_error

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    def json(self):
        if self._json_error:
            raise ValueError("No JSON")
        return self._body


class _StubSession:
    """Records requests and replays queued responses (or raises queued errors)."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests = []

    def request(self, method, url, timeout=None, **kwargs):
        self.requests.append((method, url, kwargs))
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


def _api(*responses):
    session = _StubSession(*responses)
    return ProductApi(BASE + "/", timeout=3, session=session), session


def test_list_products_parses_json_list(sample_rows):
    api, session = _api(_StubResponse(body=sample_rows))

    products = api.list_products()

    assert [p.id for p in products] == [1, 2]
    assert session.requests[0][:2] == ("GET", BASE)


def test_create_posts_api_shaped_payload():
    api, session = _api(_StubResponse(201, {"id": 9, "title": "Hat", "price": 25, "images": []}))
    payload = ProductPayload(title="Hat", price=25, category_id=1, images=["https://x/h.png"])

    created = api.create_product(payload)

    method, url, kwargs = session.requests[0]
    assert (method, url) == ("POST", BASE)
    assert kwargs["json"]["categoryId"] == 1
    assert created.id == 9


def test_update_and_delete_address_the_product_url():
    api, session = _api(
        _StubResponse(body={"id": 4, "title": "New", "price": 1}),
        _StubResponse(body=True),
    )
    payload = ProductPayload(title="New", price=1, category_id=1, images=["https://x/h.png"])

    api.update_product(4, payload)
    api.delete_product(4)

    assert [r[:2] for r in session.requests] == [("PUT", f"{BASE}/4"), ("DELETE", f"{BASE}/4")]


def test_non_2xx_raises_status_error_with_api_message():
    api, _ = _api(_StubResponse(400, {"message": ["price must be positive"], "statusCode": 400}, reason="Bad Request"))

    with pytest.raises(ApiStatusError) as exc:
        api.list_products()

    assert exc.value.status_code == 400
    assert "price must be positive" in str(exc.value)


def test_non_2xx_without_json_falls_back_to_reason():
    api, _ = _api(_StubResponse(503, reason="Service Unavailable", json_error=True))

    with pytest.raises(ApiStatusError) as exc:
        api.delete_product(1)

    assert exc.value.message == "Service Unavailable"


def test_transport_failure_is_wrapped():
    api, _ = _api(requests.exceptions.ConnectionError("refused"))

    with pytest.raises(ApiTransportError):
        api.list_products()


def test_unexpected_body_shape_raises_response_error():
    api, _ = _api(_StubResponse(body={"not": "a list"}))

    with pytest.raises(ApiResponseError):
        api.list_products()


def test_ping_never_raises():
    ok_api, session = _api(_StubResponse(body=[{"id": 1}]))
    assert ok_api.ping() is True
    assert session.requests[0][2]["params"] == {"limit": 1}

    down_api, _ = _api(requests.exceptions.Timeout("slow"))
    assert down_api.ping() is False

    wrong_api, _ = _api(_StubResponse(body={"error": "nope"}))
    assert wrong_api.ping() is False
