import json
import os
import tempfile
from datetime import datetime, timedelta, timezone
from itertools import count

# must be set before storefront.config is imported
_DB_PATH = os.path.join(tempfile.mkdtemp(prefix="storefront-tests-"), "test.db")
os.environ["DATABASE_URL"] = f"sqlite:///{_DB_PATH}"
os.environ.setdefault("LOG_LEVEL", "DEBUG")

import pytest
from fastapi.testclient import TestClient

from storefront.db import SessionLocal, init_db
from storefront.main import app
from storefront.models.product import Product

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def db():
    # fresh schema + seeded categories (ids 1..8) for every test
    init_db(reset=True)
    s = SessionLocal()
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def make_product(db):
    seq = count(1)

    def _make(name="Test Product", **kw):
        n = next(seq)
        p = Product(
            sku=kw.pop("sku", f"SKU-{n:04d}"),
            name=name,
            description=kw.pop("description", f"{name} description"),
            category_id=kw.pop("category_id", 1),
            subcategory=kw.pop("subcategory", "misc"),
            price_in_cents=kw.pop("price_in_cents", 1000),
            sizes=json.dumps(kw.pop("sizes", ["One Size"])),
            colors=json.dumps(kw.pop("colors", ["Black"])),
            image_url=kw.pop("image_url", f"/images/{n}.png"),
            stock_quantity=kw.pop("stock_quantity", 10),
            weight_oz=kw.pop("weight_oz", 12.5),
            created_at=kw.pop(
                "created_at", (BASE_TIME + timedelta(hours=n)).isoformat()
            ),
        )
        assert not kw, f"unexpected fields: {kw}"
        db.add(p)
        db.commit()
        db.refresh(p)
        return p

    return _make


@pytest.fixture
def client(db):
    return TestClient(app)
