import json
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from storefront.models.product import Product

SortBy = Literal["name", "price", "createdAt"]
SortOrder = Literal["asc", "desc"]


class ProductOut(BaseModel):
    """Public product shape; serialises with camelCase keys (``priceInCents`` etc)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    sku: str
    name: str
    description: str
    category_id: int
    subcategory: str
    price_in_cents: int
    sizes: List[str]
    colors: List[str]
    image_url: str
    stock_quantity: int
    weight_oz: float
    created_at: str


def product_from_row(row: Product) -> ProductOut:
    """
    The single conversion from a stored ``products`` row to ``ProductOut``.
    Every entry point (lookups, list queries, suggestions) goes through here.
    """
    return ProductOut(
        id=row.id,
        sku=row.sku,
        name=row.name,
        description=row.description,
        category_id=row.category_id,
        subcategory=row.subcategory,
        price_in_cents=row.price_in_cents,
        sizes=json.loads(row.sizes),
        colors=json.loads(row.colors),
        image_url=row.image_url,
        stock_quantity=row.stock_quantity,
        weight_oz=row.weight_oz,
        created_at=row.created_at,
    )


class FilterSet(BaseModel):
    category_id: Optional[int] = None
    subcategory: Optional[str] = None
    min_price: Optional[int] = None
    max_price: Optional[int] = None
    search: Optional[str] = None
    sort_by: SortBy = "name"
    sort_order: SortOrder = "asc"

    @property
    def search_term(self) -> Optional[str]:
        """Trimmed search term, or None when absent or blank."""
        if self.search is None:
            return None
        term = self.search.strip()
        return term or None


class ResultPage(BaseModel):
    items: List[ProductOut] = Field(default_factory=list)
    total: int = 0

    def to_dict(self) -> dict:
        return {
            "items": [p.model_dump(by_alias=True) for p in self.items],
            "total": self.total,
        }
