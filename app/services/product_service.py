# app/services/product_service.py
from sqlalchemy.orm import Session

from app.data.models.product import ProductModel
from app.domain.errors import CatalogValidationError, ProductNotFoundError
from app.domain.schemas import ProductFilter, ProductOut
from app.repos.product_repo import ProductRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)


def _to_out(products: list[ProductModel]) -> list[ProductOut]:
    return [ProductOut.model_validate(p) for p in products]


class ProductService:
    """
    Katalog produktow oparty o baze danych, tylko zapytania (read only).
    Zwraca ProductOut, wiec sesja moze byc zamknieta przed serializacja.
    """

    def __init__(self, db: Session):
        self.repo = ProductRepo(db)

    def list_all(self) -> list[ProductOut]:
        products = self.repo.list_products()
        logger.debug(f"list_all -> {len(products)} products")
        return _to_out(products)

    def list_featured(self) -> list[ProductOut]:
        return _to_out(self.repo.list_featured())

    def get_by_id(self, product_id: int) -> ProductOut:
        product = self.repo.get_product(product_id)
        if not product:
            logger.info(f"Product {product_id} not found")
            raise ProductNotFoundError(product_id)
        return ProductOut.model_validate(product)

    def list_by_category(self, category: str) -> list[ProductOut]:
        return _to_out(self.repo.list_by_category(category))

    def search(self, query: str) -> list[ProductOut]:
        query = query.strip()
        if not query:
            raise CatalogValidationError("Search query must not be blank")

        products = self.repo.search(query)
        logger.info(f"Search '{query}' -> {len(products)} products")
        return _to_out(products)

    def list_filtered(self, criteria: ProductFilter) -> list[ProductOut]:
        if (
            criteria.min_price is not None
            and criteria.max_price is not None
            and criteria.min_price > criteria.max_price
        ):
            raise CatalogValidationError("minPrice must not be greater than maxPrice")

        if criteria.is_empty():
            return self.list_all()

        products = self.repo.list_filtered(criteria)
        logger.info(f"Filter {criteria.to_query_params()} -> {len(products)} products")
        return _to_out(products)
