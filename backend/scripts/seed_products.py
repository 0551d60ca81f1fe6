#!/usr/bin/env python3
"""
Seed products from a JSON file.

Accepts either a plain list of product entries or an object with an ``items``
list. Entries may give the price as ``priceInCents`` / ``price_in_cents`` or as
a decimal ``price``, and the category as an id (``categoryId``) or a slug
(``category``). Products are upserted by SKU.

Usage:
    python scripts/seed_products.py --file data/products.json
"""
import argparse
import json
import os
import sys
from datetime import datetime, timezone

# allow running from repo/scripts
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from storefront.db import SessionLocal, init_db
from storefront.repositories.category_repo import CategoryRepository
from storefront.repositories.product_repo import ProductRepository
from storefront.utils.logging import get_logger

log = get_logger("seed")


def _pick(entry, *keys, default=None):
    for k in keys:
        if entry.get(k) is not None:
            return entry[k]
    return default


def _as_list(value):
    if value is None:
        return []
    if isinstance(value, str):
        # accept both '["S","M"]' and "S,M"
        try:
            parsed = json.loads(value)
            if isinstance(parsed, list):
                return [str(v) for v in parsed]
        except ValueError:
            pass
        return [v.strip() for v in value.split(",") if v.strip()]
    return [str(v) for v in value]


def _price_cents(entry) -> int:
    cents = _pick(entry, "priceInCents", "price_in_cents")
    if cents is not None:
        return int(cents)
    return int(round(float(_pick(entry, "price", default=0)) * 100))


def normalize_entry(entry: dict, category_ids_by_slug: dict) -> dict:
    """Return kwargs for ProductRepository.create_or_update, or raise ValueError."""
    sku = _pick(entry, "sku")
    if not sku:
        raise ValueError(f"entry without sku: {entry!r}")

    category_id = _pick(entry, "categoryId", "category_id")
    if category_id is not None:
        category_id = int(category_id)
        if category_id not in set(category_ids_by_slug.values()):
            raise ValueError(f"{sku}: unknown category id {category_id}")
    else:
        slug = _pick(entry, "category", "categorySlug")
        if slug not in category_ids_by_slug:
            raise ValueError(f"{sku}: unknown category {slug!r}")
        category_id = category_ids_by_slug[slug]

    price = _price_cents(entry)
    stock = int(_pick(entry, "stockQuantity", "stock_quantity", "stock", default=0))
    weight = float(_pick(entry, "weightOz", "weight_oz", default=0.0))
    if price < 0 or stock < 0 or weight < 0:
        raise ValueError(f"{sku}: price, stock and weight must be non-negative")

    return {
        "sku": sku,
        "name": _pick(entry, "name", default=""),
        "description": _pick(entry, "description", default=""),
        "category_id": category_id,
        "subcategory": _pick(entry, "subcategory", default=""),
        "price_in_cents": price,
        "sizes": _as_list(_pick(entry, "sizes")),
        "colors": _as_list(_pick(entry, "colors")),
        "image_url": _pick(entry, "imageUrl", "image_url", default=""),
        "stock_quantity": stock,
        "weight_oz": weight,
        "created_at": _pick(
            entry, "createdAt", "created_at", default=datetime.now(timezone.utc).isoformat()
        ),
    }


def seed_from_file(path: str) -> int:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict) and isinstance(data.get("items"), list):
        source_list = data["items"]
    elif isinstance(data, list):
        source_list = data
    else:
        raise ValueError(f"{path}: expected a list or an object with 'items'")

    init_db(reset=False)
    db = SessionLocal()
    try:
        slugs = {c.slug: c.id for c in CategoryRepository(db).list()}
        repo = ProductRepository(db)
        seeded = 0
        for entry in source_list:
            repo.create_or_update(**normalize_entry(entry, slugs))
            seeded += 1
        db.commit()
        log.info(f"Seeded products: {seeded}")
        return seeded
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--file", "-f", required=True, help="Path to product json (list or {'items': [...]})")
    args = parser.parse_args()
    if not os.path.exists(args.file):
        log.error(f"File not found: {args.file}")
        sys.exit(1)
    seed_from_file(args.file)
