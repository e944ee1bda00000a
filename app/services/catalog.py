# app/services/catalog.py
from typing import Protocol

from app.domain.schemas import ProductFilter, ProductOut


class ProductCatalog(Protocol):
    """
    Kontrakt zrodla produktow dla warstwy HTTP.
    get_by_id rzuca ProductNotFoundError, nigdy nie zwraca None.
    """

    def list_all(self) -> list[ProductOut]: ...

    def list_featured(self) -> list[ProductOut]: ...

    def get_by_id(self, product_id: int) -> ProductOut: ...

    def list_by_category(self, category: str) -> list[ProductOut]: ...

    def search(self, query: str) -> list[ProductOut]: ...

    def list_filtered(self, criteria: ProductFilter) -> list[ProductOut]: ...
