import os

# przed importem app: bez postgresa i bez zdalnego katalogu
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["CATALOG_BACKEND"] = "database"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.api.deps import get_catalog
from app.data.database import Base, get_db
from app.data.models.product import ProductModel
from app.domain.errors import ProductNotFoundError
from app.domain.schemas import ProductFilter, ProductOut
from app.main import create_app


PRODUCTS = [
    {"id": 1, "name": "Keyboard", "description": "Mechanical keyboard", "price": 199.99,
     "category": "Electronics", "rating": 4.5, "review_count": 10, "stock": 5, "featured": True},
    {"id": 2, "name": "Mouse", "description": "Wireless mouse", "price": 49.50,
     "category": "Electronics", "rating": 4.0, "review_count": 3, "stock": 20, "featured": False},
    {"id": 3, "name": "T-Shirt", "description": "Cotton tee", "price": 10.00,
     "category": "Clothing", "rating": 3.5, "review_count": 7, "stock": 100, "featured": False},
    {"id": 4, "name": "Socks", "description": "Wool socks, pack of three", "price": 10.00,
     "category": "clothing", "rating": None, "review_count": 0, "stock": 50, "featured": True},
    {"id": 5, "name": "Sneakers", "description": "Running shoes", "price": 10.01,
     "category": "Sports", "rating": 4.9, "review_count": 99, "stock": 8, "featured": False},
]


class FakeCatalog:
    """Katalog w pamieci, zapisuje wywolania."""

    def __init__(self, products=None):
        self.products = [ProductOut(**p) for p in (products or PRODUCTS)]
        self.calls = []

    def list_all(self):
        self.calls.append(("list_all",))
        return list(self.products)

    def list_featured(self):
        self.calls.append(("list_featured",))
        return [p for p in self.products if p.featured]

    def get_by_id(self, product_id):
        self.calls.append(("get_by_id", product_id))
        for p in self.products:
            if p.id == product_id:
                return p
        raise ProductNotFoundError(product_id)

    def list_by_category(self, category):
        self.calls.append(("list_by_category", category))
        return [p for p in self.products if p.category == category]

    def search(self, query):
        self.calls.append(("search", query))
        return [p for p in self.products if query.lower() in p.name.lower()]

    def list_filtered(self, criteria: ProductFilter):
        self.calls.append(("list_filtered", criteria))
        return list(self.products)


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    Session = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = Session()
    session.add_all([ProductModel(**p) for p in PRODUCTS])
    session.commit()

    yield session

    session.close()
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def fake_catalog():
    return FakeCatalog()


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app, fake_catalog):
    """Klient HTTP z podmienionym katalogiem."""
    app.dependency_overrides[get_catalog] = lambda: fake_catalog
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def db_client(app, db_session):
    """Klient HTTP z prawdziwym ProductService na SQLite w pamieci."""
    app.dependency_overrides[get_db] = lambda: db_session
    yield TestClient(app)
    app.dependency_overrides.clear()
