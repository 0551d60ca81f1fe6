import importlib

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base

from storefront.config import settings
from storefront.utils.logging import get_logger

log = get_logger("db")

DATABASE_URL = settings.DATABASE_URL
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(DATABASE_URL, future=True, echo=False, connect_args=connect_args)
if DATABASE_URL.startswith("sqlite"):

    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        # SQLite leaves FK enforcement off per connection unless asked
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

# Fixed storefront taxonomy; categories are reference data and never edited at runtime.
CATEGORIES = [
    {"name": "Camping & Hiking", "slug": "camping-hiking", "description": "Tents, sleeping bags, backpacks, and trail essentials"},
    {"name": "Climbing", "slug": "climbing", "description": "Harnesses, ropes, carabiners, and climbing gear"},
    {"name": "Apparel", "slug": "apparel", "description": "Jackets, pants, base layers, and outdoor clothing"},
    {"name": "Footwear", "slug": "footwear", "description": "Hiking boots, trail runners, and outdoor shoes"},
    {"name": "Cycling", "slug": "cycling", "description": "Helmets, jerseys, shorts, and bike accessories"},
    {"name": "Water Sports", "slug": "water-sports", "description": "Kayaking, paddleboarding, and water gear"},
    {"name": "Winter Sports", "slug": "winter-sports", "description": "Ski and snowboard apparel and accessories"},
    {"name": "Accessories", "slug": "accessories", "description": "Headlamps, water bottles, tools, and more"},
]

MODEL_MODULES = [
    "storefront.models.category",
    "storefront.models.product",
]


def init_db(reset: bool = False):
    """
    Initialize DB schema and seed the category taxonomy.

    Behavior:
      - If ``reset`` is passed or RESET_DB is set, drop & recreate tables.
      - Otherwise, leave existing tables and rows in place.

    Category seeding is idempotent: only missing slugs are inserted.
    """
    for mod in MODEL_MODULES:
        importlib.import_module(mod)

    if reset or settings.RESET_DB:
        log.info("Resetting database (reset requested)...")
        Base.metadata.drop_all(bind=engine)

    Base.metadata.create_all(bind=engine)
    log.info("Database tables ready.")

    from storefront.models.category import Category

    s = SessionLocal()
    try:
        existing = {slug for (slug,) in s.query(Category.slug).all()}
        created = 0
        for ent in CATEGORIES:
            if ent["slug"] not in existing:
                s.add(Category(**ent))
                created += 1
        if created:
            s.commit()
            log.info(f"Seeded {created} categories.")
    except Exception:
        s.rollback()
        raise
    finally:
        s.close()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
