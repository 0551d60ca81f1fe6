from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.db import engine, get_db
from storefront.services.catalog_service import CatalogService
from storefront.services.category_service import CategoryService
from storefront.utils.logging import get_logger

router = APIRouter()
log = get_logger("db")


@router.get("/health", tags=["health"])
def health():
    db_ok = False
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
            db_ok = True
    except SQLAlchemyError as e:
        log.warning(f"health(): database probe failed: {e}")

    return {
        "status": "ok" if db_ok else "degraded",
        "db": db_ok,
    }


@router.get("/stats", tags=["health"])
def stats(db: Session = Depends(get_db)):
    return {
        "products": CatalogService(db).count(),
        "categories": CategoryService(db).count(),
    }
