from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from storefront.api.routes_catalogue import run_product_query
from storefront.config import settings
from storefront.db import get_db
from storefront.schemas.product_schema import FilterSet, SortBy, SortOrder
from storefront.services.category_service import CategoryService

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("", summary="List categories")
def list_categories(db: Session = Depends(get_db)):
    return [c.model_dump() for c in CategoryService(db).list_categories()]


@router.get("/{slug}", summary="Get category by slug")
def get_category(slug: str, db: Session = Depends(get_db)):
    c = CategoryService(db).get_by_slug(slug)
    if not c:
        raise HTTPException(status_code=404, detail="Category not found")
    return c.model_dump()


@router.get("/{slug}/products", summary="List products in a category")
def list_category_products(
    slug: str,
    page: int = Query(1, ge=1),
    page_size: int = Query(
        settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, alias="pageSize"
    ),
    subcategory: Optional[str] = Query(None),
    min_price: Optional[int] = Query(None, ge=0, alias="minPrice"),
    max_price: Optional[int] = Query(None, ge=0, alias="maxPrice"),
    search: Optional[str] = Query(None),
    sort_by: SortBy = Query("name", alias="sortBy"),
    sort_order: SortOrder = Query("asc", alias="sortOrder"),
    db: Session = Depends(get_db),
):
    c = CategoryService(db).get_by_slug(slug)
    if not c:
        raise HTTPException(status_code=404, detail="Category not found")
    filters = FilterSet(
        category_id=c.id,
        subcategory=subcategory,
        min_price=min_price,
        max_price=max_price,
        search=search,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return run_product_query(db, filters, page, page_size)
