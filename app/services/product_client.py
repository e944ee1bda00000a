# app/services/product_client.py
from urllib.parse import quote

import requests

from app.domain.errors import CatalogValidationError, ProductNotFoundError
from app.domain.schemas import ProductFilter, ProductOut
from app.utils.logging import get_logger
from app.utils.retry import http_retry
from app.utils.settings import PRODUCT_SERVICE_URL, PRODUCT_SERVICE_TIMEOUT

logger = get_logger(__name__)


class ProductClient:
    """
    Katalog produktow z zewnetrznego product-service (te same sciezki /api/products).
    """

    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        self.base_url = (base_url or PRODUCT_SERVICE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else PRODUCT_SERVICE_TIMEOUT

    @http_retry()
    def _get(self, path: str, params: dict | None = None):
        url = f"{self.base_url}/api/products{path}"
        logger.info(f"ProductClient GET {url} params={params or {}}")

        resp = requests.get(url, params=params, timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()

    def _fetch(self, path: str, params: dict | None = None, product_id: int | None = None):
        try:
            return self._get(path, params)
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            if status == 404 and product_id is not None:
                raise ProductNotFoundError(product_id) from e
            if status in (400, 422):
                raise CatalogValidationError(_detail(e.response)) from e
            raise

    def _get_list(self, path: str, params: dict | None = None) -> list[ProductOut]:
        data = self._fetch(path, params)
        return [ProductOut.model_validate(item) for item in data]

    def list_all(self) -> list[ProductOut]:
        return self._get_list("")

    def list_featured(self) -> list[ProductOut]:
        return self._get_list("/featured")

    def get_by_id(self, product_id: int) -> ProductOut:
        data = self._fetch(f"/{product_id}", product_id=product_id)
        return ProductOut.model_validate(data)

    def list_by_category(self, category: str) -> list[ProductOut]:
        return self._get_list(f"/category/{quote(category, safe='')}")

    def search(self, query: str) -> list[ProductOut]:
        return self._get_list("/search", {"q": query})

    def list_filtered(self, criteria: ProductFilter) -> list[ProductOut]:
        return self._get_list("/filter", criteria.to_query_params())


def _detail(resp: requests.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return resp.text
    if isinstance(body, dict) and "detail" in body:
        return str(body["detail"])
    return resp.text
