# app/main.py
import uvicorn

from app.api import create_app
from app.data.database import Base, engine
from app.utils.settings import PORT
from app.utils.logging import get_logger

# import modeli przed create_all
from app.data.models import ProductModel  # noqa: F401

logger = get_logger(__name__)

app = create_app()

if app.state.product_backend.name == "postgres":
    logger.info(f"Creating tables: {list(Base.metadata.tables.keys())}")
    try:
        Base.metadata.create_all(bind=engine)
    except Exception as e:
        logger.error(f"Failed to create tables: {e}")
        raise


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=PORT)
