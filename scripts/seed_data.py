import argparse
import sys
from pathlib import Path

# Ensure repo root is on sys.path when running this script directly.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from sqlalchemy import delete, select

from stocktrack.core.logging import setup_logging
from stocktrack.database import Base, SessionLocal, engine
from stocktrack.models import Product, Sale, SaleItem, import_all_models

SAMPLE_PRODUCTS = (
    {"name": "Cotton Tee", "sku": "TEE-001", "quantity": 40, "location": "A1", "supplier": "Northwind"},
    {"name": "Denim Jacket", "sku": "JKT-014", "quantity": 12, "location": "B3", "supplier": "Northwind"},
    {"name": "Canvas Tote", "sku": "BAG-220", "quantity": 25, "location": "C2", "supplier": "Harbor Goods"},
)


def parse_args():
    parser = argparse.ArgumentParser(description="Seed sample products.")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Clear existing products and sales before seeding.",
    )
    return parser.parse_args()


def main():
    setup_logging()
    args = parse_args()

    import_all_models()
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        if args.reset:
            db.execute(delete(SaleItem))
            db.execute(delete(Sale))
            db.execute(delete(Product))
            db.commit()

        has_product = db.execute(select(Product.id).limit(1)).first()
        if has_product:
            print("Seed skipped: products already exist.")
            return

        db.add_all([Product(**values) for values in SAMPLE_PRODUCTS])
        db.commit()
        print("Seeded {} products.".format(len(SAMPLE_PRODUCTS)))
    finally:
        db.close()


if __name__ == "__main__":
    main()
