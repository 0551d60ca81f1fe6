from typing import List, Optional

from sqlalchemy.orm import Session

from storefront.config import settings
from storefront.repositories.product_repo import ProductRepository
from storefront.schemas.product_schema import (
    FilterSet,
    ProductOut,
    ResultPage,
    product_from_row,
)
from storefront.search import FuzzyRanker, WeightedField
from storefront.utils.logging import get_logger

log = get_logger("catalog")

SEARCH_FIELDS = (
    WeightedField("name", 1.0),
    WeightedField("colors", 0.5),
)

SUGGESTION_FIELDS = (
    WeightedField("name", 2.0),
    WeightedField("colors", 1.0),
    WeightedField("subcategory", 0.5),
)


class CatalogException(Exception):
    pass


class InvalidPageRequest(CatalogException):
    pass


class CatalogService:
    def __init__(self, db: Session):
        self.db = db
        self.product_repo = ProductRepository(db)
        self.search_ranker = FuzzyRanker(SEARCH_FIELDS, settings.SEARCH_THRESHOLD)
        self.suggestion_ranker = FuzzyRanker(
            SUGGESTION_FIELDS, settings.SUGGESTION_THRESHOLD
        )

    def _check_page(self, page: int, page_size: int):
        if page < 1:
            raise InvalidPageRequest(f"page must be >= 1, got {page}")
        if page_size < 1 or page_size > settings.MAX_PAGE_SIZE:
            raise InvalidPageRequest(
                f"page_size must be between 1 and {settings.MAX_PAGE_SIZE}, got {page_size}"
            )

    def query(
        self, filters: Optional[FilterSet] = None, page: int = 1, page_size: int = 20
    ) -> ResultPage:
        """
        Return one page of products matching ``filters`` plus the total match count.

        With no search term (or a blank one) the constraints become a SQL WHERE
        clause, sorted by the requested key with id as tie-breaker and sliced with
        OFFSET/LIMIT. With a search term the same constraints pick the candidates,
        which are fuzzy-ranked in memory and sliced with the same window; ``total``
        always counts the set the page was sliced from.
        """
        filters = filters or FilterSet()
        self._check_page(page, page_size)
        offset = (page - 1) * page_size

        base = self.product_repo.filtered(
            category_id=filters.category_id,
            subcategory=filters.subcategory,
            min_price=filters.min_price,
            max_price=filters.max_price,
        )

        term = filters.search_term
        if term is None:
            total = self.product_repo.count(base)
            rows = self.product_repo.page(
                base,
                sort_by=filters.sort_by,
                sort_order=filters.sort_order,
                offset=offset,
                limit=page_size,
            )
            log.debug(
                f"query(): exact filter total={total} page={page} returned={len(rows)}"
            )
            return ResultPage(items=[product_from_row(r) for r in rows], total=total)

        candidates = [
            product_from_row(r) for r in self.product_repo.in_storage_order(base)
        ]
        # relevance wins: sort_by / sort_order do not apply to search results
        ranked = self.search_ranker.rank(term, candidates)
        log.debug(
            f"query(): fuzzy search term={term!r} candidates={len(candidates)} matched={len(ranked)}"
        )
        return ResultPage(items=ranked[offset : offset + page_size], total=len(ranked))

    def get_by_id(self, product_id: int) -> Optional[ProductOut]:
        row = self.product_repo.get_by_id(product_id)
        return product_from_row(row) if row else None

    def get_by_sku(self, sku: str) -> Optional[ProductOut]:
        row = self.product_repo.get_by_sku(sku)
        return product_from_row(row) if row else None

    def suggest(self, query: str, limit: Optional[int] = None) -> List[ProductOut]:
        """
        Autocomplete: best fuzzy matches across the whole catalogue, no filters.

        Scans every product on each call (O(catalogue size)). Terms shorter than
        SUGGESTION_MIN_LENGTH return [] without querying storage.
        """
        if limit is None:
            limit = settings.DEFAULT_SUGGESTION_LIMIT
        term = (query or "").strip()
        if len(term) < settings.SUGGESTION_MIN_LENGTH or limit < 1:
            return []
        products = [product_from_row(r) for r in self.product_repo.all()]
        return self.suggestion_ranker.rank(term, products)[:limit]

    def count(self) -> int:
        return self.product_repo.total()
