#import modeli zeby SQLAlchemy zarejestrowal je w Base.metadata

from app.data.models.product import ProductModel

__all__ = ["ProductModel"]
