# app/api/deps.py
from fastapi import Depends
from sqlalchemy.orm import Session

from app.data.database import get_db
from app.services.catalog import ProductCatalog
from app.services.product_client import ProductClient
from app.services.product_service import ProductService
from app.utils.settings import CATALOG_BACKEND


def get_catalog(db: Session = Depends(get_db)) -> ProductCatalog:
    #sesja SQLAlchemy jest leniwa, bez zapytan nie otwiera polaczenia
    if CATALOG_BACKEND == "remote":
        return ProductClient()
    return ProductService(db)
