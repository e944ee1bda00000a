#import modeli zeby SQLAlchemy je zarejestrowal w base metadata

from app.data.models.product import ProductModel

__all__ = ["ProductModel"]
