# app/repos/product_repo.py
from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from app.data.models.product import ProductModel
from app.domain.schemas import ProductFilter


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def _all(self, stmt) -> list[ProductModel]:
        return list(self.db.scalars(stmt.order_by(ProductModel.id)))

    def get_product(self, product_id: int) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)

    def list_products(self) -> list[ProductModel]:
        return self._all(select(ProductModel))

    def list_featured(self) -> list[ProductModel]:
        return self._all(select(ProductModel).where(ProductModel.featured.is_(True)))

    def list_by_category(self, category: str) -> list[ProductModel]:
        stmt = select(ProductModel).where(func.lower(ProductModel.category) == category.lower())
        return self._all(stmt)

    def search(self, query: str) -> list[ProductModel]:
        #autoescape: % i _ w zapytaniu to zwykle znaki
        stmt = select(ProductModel).where(
            or_(
                ProductModel.name.icontains(query, autoescape=True),
                ProductModel.description.icontains(query, autoescape=True),
                ProductModel.category.icontains(query, autoescape=True),
            )
        )
        return self._all(stmt)

    def list_filtered(self, criteria: ProductFilter) -> list[ProductModel]:
        stmt = select(ProductModel)

        #kazde ustawione pole zaweza wynik, granice wlacznie
        if criteria.category is not None:
            stmt = stmt.where(func.lower(ProductModel.category) == criteria.category.lower())
        if criteria.min_price is not None:
            stmt = stmt.where(ProductModel.price >= criteria.min_price)
        if criteria.max_price is not None:
            stmt = stmt.where(ProductModel.price <= criteria.max_price)
        if criteria.min_rating is not None:
            # NULL rating nie spelnia warunku
            stmt = stmt.where(ProductModel.rating >= criteria.min_rating)

        return self._all(stmt)

    def count(self) -> int:
        return self.db.scalar(select(func.count()).select_from(ProductModel))

    def add_all(self, products: list[ProductModel]) -> None:
        self.db.add_all(products)
        self.db.commit()
