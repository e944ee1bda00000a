# app/domain/schemas.py
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ProductOut(BaseModel):
    """Schema dla produktu (response), klucze JSON w camelCase."""

    id: int
    name: str
    description: str | None = None
    price: float
    category: str
    image_url: str | None = None
    rating: float | None = None
    review_count: int = 0
    stock: int = 0
    featured: bool = False

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ProductFilter(BaseModel):
    """Kryteria filtrowania, brak pola = brak ograniczenia."""

    category: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    min_rating: float | None = None

    model_config = ConfigDict(frozen=True)

    def is_empty(self) -> bool:
        return all(
            value is None
            for value in (self.category, self.min_price, self.max_price, self.min_rating)
        )

    def to_query_params(self) -> dict:
        params = {
            "category": self.category,
            "minPrice": self.min_price,
            "maxPrice": self.max_price,
            "minRating": self.min_rating,
        }
        return {k: v for k, v in params.items() if v is not None}
