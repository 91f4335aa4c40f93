import unittest

from support import AppTestCase


class ProductApiTest(AppTestCase, unittest.TestCase):
    def test_create_defaults_quantity_to_zero(self):
        response = self.client.post(
            "/api/products",
            json={"name": "Lamp", "sku": "LMP-9", "location": "B2", "supplier": "Brightly"},
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["quantity"], 0)
        self.assertEqual(body["name"], "Lamp")
        self.assertEqual(body["sku"], "LMP-9")
        self.assertIsInstance(body["id"], int)
        self.assertIn("createdAt", body)

    def test_create_rejects_negative_quantity(self):
        response = self.client.post("/api/products", json={"name": "Lamp", "quantity": -1})
        self.assertEqual(response.status_code, 400)

    def test_list_returns_every_product(self):
        first = self.create_product(name="Widget", sku="WID-1")
        second = self.create_product(name="Gadget", sku="GAD-2", quantity=4)

        response = self.client.get("/api/products")

        self.assertEqual(response.status_code, 200)
        self.assertEqual([row["id"] for row in response.json()], [first["id"], second["id"]])

    def test_update_sets_exact_quantity(self):
        product = self.create_product(quantity=10)

        response = self.client.put(f"/api/products/{product['id']}", json={"quantity": 3})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["quantity"], 3)
        self.assertEqual(self.product_quantity(product["id"]), 3)

    def test_update_unknown_product_is_not_found(self):
        response = self.client.put("/api/products/999", json={"quantity": 3})
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["detail"], "Product not found.")

    def test_update_rejects_negative_quantity(self):
        product = self.create_product(quantity=5)
        response = self.client.put(f"/api/products/{product['id']}", json={"quantity": -2})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(self.product_quantity(product["id"]), 5)

    def test_out_of_range_id_rejected_before_lookup(self):
        huge_id = "9" * 25
        for method, kwargs in (("put", {"json": {"quantity": 1}}), ("delete", {})):
            with self.subTest(method=method):
                response = getattr(self.client, method)(f"/api/products/{huge_id}", **kwargs)
                self.assertEqual(response.status_code, 422)

        response = self.client.put(f"/api/products/{2**63 - 1}", json={"quantity": 1})
        self.assertEqual(response.status_code, 404)

    def test_delete_confirms_even_without_record(self):
        product = self.create_product()

        deleted = self.client.delete(f"/api/products/{product['id']}")
        missing = self.client.delete("/api/products/4242")

        self.assertEqual(deleted.json(), {"message": "Product deleted"})
        self.assertEqual(missing.status_code, 200)
        self.assertEqual(missing.json(), {"message": "Product deleted"})
        self.assertEqual(self.client.get("/api/products").json(), [])

    def test_health_reports_database(self):
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["database"], "ok")


if __name__ == "__main__":
    unittest.main()
