import math
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from storefront.config import settings
from storefront.db import get_db
from storefront.schemas.product_schema import FilterSet, SortBy, SortOrder
from storefront.services.catalog_service import CatalogException, CatalogService

router = APIRouter(tags=["catalogue"])


def run_product_query(db: Session, filters: FilterSet, page: int, page_size: int) -> dict:
    """Run a catalogue query and wrap it in the paginated response body."""
    svc = CatalogService(db)
    try:
        result = svc.query(filters, page=page, page_size=page_size)
    except CatalogException as e:
        raise HTTPException(status_code=400, detail=str(e))
    body = result.to_dict()
    body.update(
        {
            "page": page,
            "pageSize": page_size,
            "totalPages": math.ceil(result.total / page_size),
        }
    )
    return body


@router.get("", summary="List products")
def list_products(
    page: int = Query(1, ge=1),
    page_size: int = Query(
        settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, alias="pageSize"
    ),
    category_id: Optional[int] = Query(None, alias="categoryId"),
    subcategory: Optional[str] = Query(None),
    min_price: Optional[int] = Query(None, ge=0, alias="minPrice", description="cents"),
    max_price: Optional[int] = Query(None, ge=0, alias="maxPrice", description="cents"),
    search: Optional[str] = Query(None, description="fuzzy search term"),
    sort_by: SortBy = Query("name", alias="sortBy"),
    sort_order: SortOrder = Query("asc", alias="sortOrder"),
    db: Session = Depends(get_db),
):
    filters = FilterSet(
        category_id=category_id,
        subcategory=subcategory,
        min_price=min_price,
        max_price=max_price,
        search=search,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return run_product_query(db, filters, page, page_size)


@router.get("/suggestions", summary="Autocomplete suggestions")
def product_suggestions(
    q: str = Query("", description="partial search text"),
    limit: int = Query(
        settings.DEFAULT_SUGGESTION_LIMIT, ge=1, le=settings.MAX_SUGGESTION_LIMIT
    ),
    db: Session = Depends(get_db),
):
    svc = CatalogService(db)
    return [p.model_dump(by_alias=True) for p in svc.suggest(q, limit=limit)]


@router.get("/sku/{sku}", summary="Get product by SKU")
def get_product_by_sku(sku: str, db: Session = Depends(get_db)):
    p = CatalogService(db).get_by_sku(sku)
    if not p:
        raise HTTPException(status_code=404, detail="Product not found")
    return p.model_dump(by_alias=True)


@router.get("/{product_id}", summary="Get product by id")
def get_product(product_id: int, db: Session = Depends(get_db)):
    p = CatalogService(db).get_by_id(product_id)
    if not p:
        raise HTTPException(status_code=404, detail="Product not found")
    return p.model_dump(by_alias=True)
