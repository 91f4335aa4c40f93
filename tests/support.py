import tempfile
from pathlib import Path

from fastapi.testclient import TestClient

from stocktrack.config import Settings
from stocktrack.database import build_engine, build_session_factory
from stocktrack.factory import create_app


class AppTestCase:
    """Mixin that builds an app on an in-memory database and a temp exports dir."""

    def setUp(self):
        self._tmp_dir = tempfile.TemporaryDirectory()
        self.exports_dir = Path(self._tmp_dir.name) / "exports"
        self.settings = Settings(
            _env_file=None,
            DATABASE_URL="sqlite://",
            EXPORTS_DIR=str(self.exports_dir),
        )
        self.engine = build_engine(self.settings.DATABASE_URL)
        self.app = create_app(self.settings, db_engine=self.engine)
        self.client = TestClient(self.app)
        self.Session = build_session_factory(self.engine)

    def tearDown(self):
        self.client.close()
        self.engine.dispose()
        self._tmp_dir.cleanup()

    def create_product(self, **overrides):
        payload = {
            "name": "Widget",
            "sku": "WID-1",
            "quantity": 10,
            "location": "A1",
            "supplier": "Acme",
        }
        payload.update(overrides)
        response = self.client.post("/api/products", json=payload)
        assert response.status_code == 200, response.text
        return response.json()

    def record_sale(self, channel, items, date=None):
        payload = {"channel": channel, "items": items}
        if date is not None:
            payload["date"] = date
        return self.client.post("/api/sales", json=payload)

    def product_quantity(self, product_id):
        for product in self.client.get("/api/products").json():
            if product["id"] == product_id:
                return product["quantity"]
        return None
