"""API tests for /seed-requests and /plants."""

import unittest

from api_support import ApiTestCase, days_ago
from app.models import Plant, SeedRequest

USER_ID = "65a1f0c2b3d4e5f60718293a"
OTHER_USER_ID = "65a1f0c2b3d4e5f60718293b"


class TestCreateSeedRequest(ApiTestCase):
    def test_create_starts_pending_with_empty_progress(self) -> None:
        resp = self.client.post(
            self.url("/seed-requests"),
            json={
                "userId": USER_ID,
                "seedType": "tomato",
                "description": "Heirloom cherry tomatoes",
                "imagePath": "https://cdn.example.com/tomato.jpg",
            },
        )
        self.assertEqual(resp.status_code, 201, resp.text)
        body = resp.json()
        self.assertEqual(body["message"], "Seed request created successfully")
        seed_request = body["seedRequest"]
        self.assertEqual(seed_request["userId"], USER_ID)
        self.assertEqual(seed_request["seedType"], "tomato")
        self.assertEqual(seed_request["status"], "pending")
        self.assertEqual(seed_request["progress"], {})
        self.assertEqual(seed_request["imagePath"], "https://cdn.example.com/tomato.jpg")
        self.assertIn("createdAt", seed_request)

    def test_image_path_is_optional(self) -> None:
        resp = self.client.post(
            self.url("/seed-requests"),
            json={"userId": USER_ID, "seedType": "basil", "description": "Sweet basil"},
        )
        self.assertEqual(resp.status_code, 201)
        self.assertIsNone(resp.json()["seedRequest"]["imagePath"])

    def test_missing_description_is_400(self) -> None:
        resp = self.client.post(self.url("/seed-requests"), json={"userId": USER_ID, "seedType": "basil"})
        self.assertEqual(resp.status_code, 400)
        self.assertTrue(any(d.startswith("description") for d in resp.json()["details"]))

    def test_malformed_user_id_is_400(self) -> None:
        resp = self.client.post(
            self.url("/seed-requests"),
            json={"userId": "123", "seedType": "basil", "description": "Sweet basil"},
        )
        self.assertEqual(resp.status_code, 400)


class TestListSeedRequests(ApiTestCase):
    def _seed(self) -> None:
        with self.session() as db:
            db.add_all(
                [
                    SeedRequest(user_id=USER_ID, seed_type="old", description="d", created_at=days_ago(3)),
                    SeedRequest(user_id=USER_ID, seed_type="new", description="d", created_at=days_ago(1)),
                    SeedRequest(user_id=USER_ID, seed_type="mid", description="d", created_at=days_ago(2)),
                    SeedRequest(user_id=OTHER_USER_ID, seed_type="theirs", description="d"),
                ]
            )
            db.commit()

    def test_lists_only_users_requests_newest_first(self) -> None:
        self._seed()
        resp = self.client.get(self.url("/seed-requests"), params={"userId": USER_ID})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual([r["seedType"] for r in resp.json()], ["new", "mid", "old"])

    def test_unknown_user_has_empty_list(self) -> None:
        resp = self.client.get(self.url("/seed-requests"), params={"userId": "c" * 24})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), [])

    def test_missing_user_id_is_400(self) -> None:
        resp = self.client.get(self.url("/seed-requests"))
        self.assertEqual(resp.status_code, 400)

    def test_progress_values_round_trip(self) -> None:
        with self.session() as db:
            db.add(
                SeedRequest(
                    user_id=USER_ID,
                    seed_type="pepper",
                    description="d",
                    status="approved",
                    progress={"germinated": True, "heightCm": 4.5, "stage": "seedling", "leaves": 3},
                )
            )
            db.commit()
        resp = self.client.get(self.url("/seed-requests"), params={"userId": USER_ID})
        self.assertEqual(resp.status_code, 200)
        progress = resp.json()[0]["progress"]
        self.assertIs(progress["germinated"], True)
        self.assertEqual(progress["heightCm"], 4.5)
        self.assertEqual(progress["stage"], "seedling")
        self.assertEqual(progress["leaves"], 3)


class TestPlants(ApiTestCase):
    def test_add_plant_starts_at_zero_progress(self) -> None:
        resp = self.client.post(self.url("/plants"), json={"userId": USER_ID, "plantName": "Fern"})
        self.assertEqual(resp.status_code, 201, resp.text)
        body = resp.json()
        self.assertEqual(body["message"], "Plant added successfully")
        self.assertEqual(body["plant"]["plantName"], "Fern")
        self.assertEqual(body["plant"]["progress"], 0)
        self.assertEqual(body["plant"]["userId"], USER_ID)

    def test_add_plant_requires_user_and_name(self) -> None:
        for body in ({"userId": USER_ID}, {"plantName": "Fern"}, {"userId": USER_ID, "plantName": ""}):
            resp = self.client.post(self.url("/plants"), json=body)
            self.assertEqual(resp.status_code, 400, body)

    def test_list_plants_newest_first(self) -> None:
        with self.session() as db:
            db.add_all(
                [
                    Plant(user_id=USER_ID, plant_name="first", created_at=days_ago(2)),
                    Plant(user_id=USER_ID, plant_name="second", created_at=days_ago(1)),
                    Plant(user_id=OTHER_USER_ID, plant_name="theirs"),
                ]
            )
            db.commit()
        resp = self.client.get(self.url(f"/plants/{USER_ID}/list"))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual([p["plantName"] for p in resp.json()], ["second", "first"])

    def test_garden_view_includes_every_status(self) -> None:
        with self.session() as db:
            for i, status in enumerate(("pending", "approved", "released", "rejected")):
                db.add(
                    SeedRequest(
                        user_id=USER_ID,
                        seed_type=status,
                        description="d",
                        status=status,
                        created_at=days_ago(10 - i),
                    )
                )
            db.commit()
        resp = self.client.get(self.url(f"/plants/{USER_ID}"))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(
            [r["status"] for r in resp.json()],
            ["rejected", "released", "approved", "pending"],
        )

    def test_garden_view_rejects_malformed_user_id(self) -> None:
        resp = self.client.get(self.url("/plants/not-an-id"))
        self.assertEqual(resp.status_code, 400)


if __name__ == "__main__":
    unittest.main()
