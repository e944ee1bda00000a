# app/api/routers/products.py
import math
from typing import List

from fastapi import APIRouter, Depends, Path, Query
from fastapi.exceptions import RequestValidationError

from app.api.deps import get_catalog
from app.domain.schemas import ProductFilter, ProductOut
from app.services.catalog import ProductCatalog

router = APIRouter(prefix="/api/products", tags=["products"])

# zakres kolumny Integer (int4)
MIN_PRODUCT_ID = -(2**31)
MAX_PRODUCT_ID = 2**31 - 1


def _optional_float(name: str, raw: str | None) -> float | None:
    #puste pole z formularza = brak ograniczenia
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        value = None
    if value is None or not math.isfinite(value):
        raise RequestValidationError([
            {
                "type": "finite_number",
                "loc": ("query", name),
                "msg": "Input should be a finite number",
                "input": raw,
            }
        ])
    return value


def filter_criteria(
    category: str | None = Query(None),
    min_price: str | None = Query(None, alias="minPrice"),
    max_price: str | None = Query(None, alias="maxPrice"),
    min_rating: str | None = Query(None, alias="minRating"),
) -> ProductFilter:
    return ProductFilter(
        category=category if category and category.strip() else None,
        min_price=_optional_float("minPrice", min_price),
        max_price=_optional_float("maxPrice", max_price),
        min_rating=_optional_float("minRating", min_rating),
    )


#stale sciezki (/featured, /search, /filter, /category) przed /{product_id}


@router.get("", response_model=List[ProductOut])
def get_all_products(catalog: ProductCatalog = Depends(get_catalog)):
    return catalog.list_all()


@router.get("/featured", response_model=List[ProductOut])
def get_featured_products(catalog: ProductCatalog = Depends(get_catalog)):
    return catalog.list_featured()


@router.get("/search", response_model=List[ProductOut])
def search_products(
    q: str = Query(..., min_length=1),
    catalog: ProductCatalog = Depends(get_catalog),
):
    return catalog.search(q)


@router.get("/filter", response_model=List[ProductOut])
def get_products_with_filters(
    criteria: ProductFilter = Depends(filter_criteria),
    catalog: ProductCatalog = Depends(get_catalog),
):
    return catalog.list_filtered(criteria)


@router.get("/category/{category}", response_model=List[ProductOut])
def get_products_by_category(category: str, catalog: ProductCatalog = Depends(get_catalog)):
    return catalog.list_by_category(category)


@router.get("/{product_id}", response_model=ProductOut)
def get_product_by_id(
    product_id: int = Path(..., ge=MIN_PRODUCT_ID, le=MAX_PRODUCT_ID),
    catalog: ProductCatalog = Depends(get_catalog),
):
    return catalog.get_by_id(product_id)
