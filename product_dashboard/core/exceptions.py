class DashboardError(Exception):
    """Base exception for all product_dashboard errors"""
    pass

class ConfigError(DashboardError):
    """Invalid or inconsistent global.json or environment override"""
    pass

class ProductNotFoundError(DashboardError):
    """
    Operation referenced a product id that is no longer in the canonical list
    (stale detail/edit/delete reference)
    """

    def __init__(self, product_id):
        self.product_id = product_id
        super().__init__(f"Product '{product_id}' not found")


class ProductApiError(DashboardError):
    """Any failure talking to the remote product collection"""
    pass

class ApiTransportError(ProductApiError):
    """API unreachable: DNS, connection refused, timeout, etc"""
    pass

class ApiStatusError(ProductApiError):
    """Remote API answered with a non-2xx status"""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class ApiResponseError(ProductApiError):
    """2xx answer whose body is not the JSON shape we expect"""
    pass
