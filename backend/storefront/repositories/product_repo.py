import json
from typing import List, Optional, Sequence

from sqlalchemy import func
from sqlalchemy.orm import Query, Session

from storefront.models.product import Product

# sort key (as exposed by the API) -> storage column
SORT_COLUMNS = {
    "name": Product.name,
    "price": Product.price_in_cents,
    "createdAt": Product.created_at,
}


class ProductRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, product_id: int) -> Optional[Product]:
        return self.db.query(Product).filter(Product.id == product_id).first()

    def get_by_sku(self, sku: str) -> Optional[Product]:
        return self.db.query(Product).filter(Product.sku == sku).first()

    def filtered(
        self,
        category_id: Optional[int] = None,
        subcategory: Optional[str] = None,
        min_price: Optional[int] = None,
        max_price: Optional[int] = None,
    ) -> Query:
        """
        Base query with every active constraint ANDed together.
        ``None`` means "no constraint"; an empty subcategory is treated the same.
        """
        query = self.db.query(Product)
        if category_id is not None:
            query = query.filter(Product.category_id == category_id)
        if subcategory:
            query = query.filter(Product.subcategory == subcategory)
        if min_price is not None:
            query = query.filter(Product.price_in_cents >= min_price)
        if max_price is not None:
            query = query.filter(Product.price_in_cents <= max_price)
        return query

    def count(self, query: Query) -> int:
        return query.with_entities(func.count(Product.id)).scalar() or 0

    def page(
        self,
        query: Query,
        sort_by: str = "name",
        sort_order: str = "asc",
        offset: int = 0,
        limit: int = 20,
    ) -> List[Product]:
        column = SORT_COLUMNS[sort_by]
        primary = column.desc() if sort_order == "desc" else column.asc()
        # id breaks ties so equal sort keys keep storage order between calls
        return (
            query.order_by(primary, Product.id.asc())
            .offset(offset)
            .limit(limit)
            .all()
        )

    def in_storage_order(self, query: Query) -> List[Product]:
        return query.order_by(Product.id.asc()).all()

    def all(self) -> List[Product]:
        return self.in_storage_order(self.db.query(Product))

    def total(self) -> int:
        return self.count(self.db.query(Product))

    def create_or_update(
        self,
        sku: str,
        name: str,
        category_id: int,
        subcategory: str,
        price_in_cents: int,
        created_at: str,
        description: str = "",
        sizes: Sequence[str] = (),
        colors: Sequence[str] = (),
        image_url: str = "",
        stock_quantity: int = 0,
        weight_oz: float = 0.0,
    ) -> Product:
        fields = dict(
            name=name,
            description=description,
            category_id=category_id,
            subcategory=subcategory,
            price_in_cents=price_in_cents,
            sizes=json.dumps(list(sizes)),
            colors=json.dumps(list(colors)),
            image_url=image_url,
            stock_quantity=stock_quantity,
            weight_oz=weight_oz,
        )
        p = self.get_by_sku(sku)
        if p:
            for key, value in fields.items():
                setattr(p, key, value)
        else:
            p = Product(sku=sku, created_at=created_at, **fields)
            self.db.add(p)
        self.db.flush()
        return p
