# app/data/seed.py
from app.data.database import SessionLocal
from app.data.models.product import ProductModel
from app.repos.product_repo import ProductRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)

DEMO_PRODUCTS = [
    {"name": "Mechanical Keyboard", "description": "Hot-swappable switches, RGB backlight",
     "price": 199.99, "category": "Electronics", "rating": 4.6, "review_count": 312, "stock": 40, "featured": True},
    {"name": "Wireless Mouse", "description": "Ergonomic mouse with silent clicks",
     "price": 49.50, "category": "Electronics", "rating": 4.2, "review_count": 128, "stock": 150},
    {"name": "4K Monitor", "description": "27 inch IPS panel",
     "price": 899.00, "category": "Electronics", "rating": 4.8, "review_count": 87, "stock": 12, "featured": True},
    {"name": "Cotton T-Shirt", "description": "Basic crew neck tee",
     "price": 10.00, "category": "Clothing", "rating": 3.9, "review_count": 45, "stock": 500},
    {"name": "Running Shoes", "description": "Lightweight trail running shoes",
     "price": 129.00, "category": "Sports", "rating": 4.4, "review_count": 201, "stock": 60, "featured": True},
    {"name": "Coffee Grinder", "description": "Burr grinder for espresso and filter coffee",
     "price": 75.25, "category": "Home", "rating": None, "review_count": 0, "stock": 25},
]


def seed(db=None):
    own_session = db is None
    if own_session:
        db = SessionLocal()
    try:
        repo = ProductRepo(db)
        # seed tylko gdy tabela pusta
        if repo.count():
            return 0
        repo.add_all([ProductModel(**data) for data in DEMO_PRODUCTS])
        logger.info(f"Seeded {len(DEMO_PRODUCTS)} demo products")
        return len(DEMO_PRODUCTS)
    finally:
        if own_session:
            db.close()
