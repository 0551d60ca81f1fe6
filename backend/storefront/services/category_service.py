from typing import List, Optional

from sqlalchemy.orm import Session

from storefront.repositories.category_repo import CategoryRepository
from storefront.schemas.category_schema import CategoryOut


class CategoryService:
    def __init__(self, db: Session):
        self.db = db
        self.category_repo = CategoryRepository(db)

    def list_categories(self) -> List[CategoryOut]:
        return [CategoryOut.model_validate(c) for c in self.category_repo.list()]

    def get_by_slug(self, slug: str) -> Optional[CategoryOut]:
        c = self.category_repo.get_by_slug(slug)
        return CategoryOut.model_validate(c) if c else None

    def get_by_id(self, category_id: int) -> Optional[CategoryOut]:
        c = self.category_repo.get_by_id(category_id)
        return CategoryOut.model_validate(c) if c else None

    def count(self) -> int:
        return self.category_repo.count()
