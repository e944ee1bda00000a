# app/domain/errors.py


class CatalogError(Exception):
    """Bazowy blad katalogu produktow."""


class ProductNotFoundError(CatalogError, LookupError):
    def __init__(self, product_id: int):
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


class CatalogValidationError(CatalogError, ValueError):
    """Niepoprawne kryteria zapytania (np. minPrice > maxPrice)."""
