from sqlalchemy import Column, Integer, String, Text
from storefront.db import Base

class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    slug = Column(String(128), unique=True, index=True, nullable=False)
    name = Column(String(256), nullable=False)
    description = Column(Text, nullable=False, default="")

    def __repr__(self):
        return f"<Category slug={self.slug} name={self.name}>"
