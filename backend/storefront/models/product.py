from sqlalchemy import CheckConstraint, Column, Float, ForeignKey, Integer, String, Text
from storefront.db import Base

class Product(Base):
    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint("price_in_cents >= 0", name="ck_products_price_non_negative"),
        CheckConstraint("stock_quantity >= 0", name="ck_products_stock_non_negative"),
        CheckConstraint("weight_oz >= 0", name="ck_products_weight_non_negative"),
    )

    id = Column(Integer, primary_key=True, index=True)
    sku = Column(String(64), unique=True, index=True, nullable=False)
    name = Column(String(256), nullable=False)
    description = Column(Text, nullable=False, default="")
    category_id = Column(
        Integer, ForeignKey("categories.id"), nullable=False, index=True
    )
    subcategory = Column(String(128), nullable=False, index=True)
    price_in_cents = Column(Integer, nullable=False, default=0, index=True)
    # JSON-encoded lists, e.g. '["S", "M", "L"]'
    sizes = Column(Text, nullable=False, default="[]")
    colors = Column(Text, nullable=False, default="[]")
    image_url = Column(String(512), nullable=False, default="")
    stock_quantity = Column(Integer, nullable=False, default=0)
    weight_oz = Column(Float, nullable=False, default=0.0)
    created_at = Column(String(32), nullable=False)  # ISO-8601

    def __repr__(self):
        return f"<Product sku={self.sku} name={self.name}>"
