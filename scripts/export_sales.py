import argparse
import sys
from pathlib import Path

# Ensure repo root is on sys.path when running this script directly.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from sqlalchemy.exc import SQLAlchemyError

from stocktrack.config import get_settings
from stocktrack.core.errors import NotFoundError
from stocktrack.core.logging import setup_logging
from stocktrack.database import Base, SessionLocal, engine
from stocktrack.models import import_all_models
from stocktrack.services.export_service import SalesWorkbookExporter
from stocktrack.services.sale_store import SaleStore


def parse_args():
    parser = argparse.ArgumentParser(
        description="Rebuild the full sales export workbook from the database."
    )
    parser.add_argument(
        "--exports-dir",
        default=None,
        help="Directory to write into. Default: EXPORTS_DIR setting.",
    )
    return parser.parse_args()


def main():
    setup_logging()
    args = parse_args()
    settings = get_settings()

    exporter = SalesWorkbookExporter.from_settings(settings)
    if args.exports_dir:
        exporter.exports_dir = Path(args.exports_dir)

    import_all_models()
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        store = SaleStore(db)
        sales = store.list_all()
        path = exporter.rebuild(sales, store.referenced_products(sales))
    except NotFoundError as exc:
        raise SystemExit(f"Export skipped: {exc}") from exc
    except (OSError, SQLAlchemyError) as exc:
        raise SystemExit(f"Export failed: {exc}") from exc
    finally:
        db.close()

    print(f"Exported {len(sales)} sales to {path}")


if __name__ == "__main__":
    main()
