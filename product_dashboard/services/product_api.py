from __future__ import annotations

import logging
import time
from typing import Any, List, Optional

import requests

from product_dashboard.core.exceptions import (
    ApiResponseError,
    ApiStatusError,
    ApiTransportError,
)
from product_dashboard.core.product import Product, ProductId, ProductPayload

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.escuelajs.co/api/v1/products"
DEFAULT_TIMEOUT = 10.0


class ProductApi:
    """
    Thin client for the remote product collection (one base resource path).

    No authentication, no retries: every failure is raised to the caller as a
    ProductApiError subclass and the user re-triggers the action.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _url(self, product_id: Optional[ProductId] = None) -> str:
        if product_id is None:
            return self.base_url
        return f"{self.base_url}/{product_id}"

    def _request(self, method: str, url: str, **kwargs) -> requests.Response:
        started = time.perf_counter()
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            logger.error("API %s %s failed: %s", method, url, e)
            raise ApiTransportError(f"Could not reach the product API: {e}") from e

        elapsed_ms = round((time.perf_counter() - started) * 1000, 1)
        logger.info(
            "api_request",
            extra={
                "method": method,
                "url": url,
                "status": response.status_code,
                "elapsed_ms": elapsed_ms,
            },
        )

        if not response.ok:
            message = _error_message(response)
            logger.error("API %s %s returned %s: %s", method, url, response.status_code, message)
            raise ApiStatusError(response.status_code, message)
        return response

    def _json(self, response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise ApiResponseError("Product API returned a non-JSON body") from e

    # ------------------------------------------------------------------
    # Collection operations
    # ------------------------------------------------------------------
    def list_products(self) -> List[Product]:
        data = self._json(self._request("GET", self._url()))
        if not isinstance(data, list):
            raise ApiResponseError("Expected a JSON list of products")
        products = [Product.from_dict(item) for item in data if isinstance(item, dict)]
        logger.info("Received %d products from API", len(products))
        return products

    def create_product(self, payload: ProductPayload) -> Product:
        data = self._json(self._request("POST", self._url(), json=payload.to_api()))
        if not isinstance(data, dict):
            raise ApiResponseError("Expected the created product in the response")
        return Product.from_dict(data)

    def update_product(self, product_id: ProductId, payload: ProductPayload) -> Product:
        data = self._json(self._request("PUT", self._url(product_id), json=payload.to_api()))
        if not isinstance(data, dict):
            raise ApiResponseError("Expected the updated product in the response")
        return Product.from_dict(data)

    def delete_product(self, product_id: ProductId) -> None:
        self._request("DELETE", self._url(product_id))

    def ping(self) -> bool:
        """
        Connectivity probe: fetch a single product and check the body is a list.
        Never raises.
        """
        try:
            response = self._request("GET", self._url(), params={"limit": 1})
            return isinstance(response.json(), list)
        except (ApiTransportError, ApiStatusError, ValueError):
            logger.warning("API connectivity test failed for %s", self.base_url)
            return False


def _error_message(response: requests.Response) -> str:
    """Pick the most useful message out of an error response."""
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        message = body.get("message") or body.get("error")
        if isinstance(message, list):
            return "; ".join(str(m) for m in message)
        if message:
            return str(message)
    return response.reason or "Request failed"
