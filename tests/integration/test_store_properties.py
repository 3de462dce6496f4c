"""
Integration tests for the HTTP API against an in-memory document store.

Data is seeded through the API itself so every request runs the real
repositories and use cases.
"""

ANA = "ana@example.com"
BEN = "ben@example.com"


def create_skill(client, **fields):
    body = {"title": "Lesson", "category": "Music", "creatorEmail": ANA, **fields}
    response = client.post("/create-skills", json=body)
    assert response.status_code == 200
    return response.json()["insertedId"]


class TestSkillListing:
    """Paging and search over stored skills."""

    def test_page_holds_at_most_size_and_count_ignores_paging(self, store_client):
        for index in range(7):
            create_skill(store_client, title=f"Lesson {index}")

        first = store_client.get("/get-skills", params={"page": "0", "size": "3"}).json()
        last = store_client.get("/get-skills", params={"page": "2", "size": "3"}).json()
        beyond = store_client.get("/get-skills", params={"page": "9", "size": "3"}).json()

        assert len(first["skills"]) == 3
        assert len(last["skills"]) == 1
        assert beyond["skills"] == []
        assert first["count"] == last["count"] == beyond["count"] == 7

    def test_category_search_ignores_case(self, store_client):
        create_skill(store_client, category="cooking")
        create_skill(store_client, category="COOKING")
        create_skill(store_client, category="Music")

        body = store_client.get("/get-skills", params={"searchParams": "Cooking"}).json()

        assert body["count"] == 2
        assert sorted(skill["category"] for skill in body["skills"]) == ["COOKING", "cooking"]

    def test_oversized_page_returns_empty_page(self, store_client):
        create_skill(store_client)

        response = store_client.get(
            "/get-skills", params={"page": str(10**20), "size": str(10**20)}
        )

        assert response.status_code == 200
        assert response.json() == {"skills": [], "count": 1}

    def test_trending_returns_top_five_by_count(self, store_client):
        counts = {"Music": 4, "Cooking": 3, "Art": 3, "Code": 2, "Yoga": 2, "Chess": 1}
        for category, count in counts.items():
            for _ in range(count):
                create_skill(store_client, category=category)

        rows = store_client.get("/trending-skills").json()

        assert len(rows) == 5
        assert rows[0] == {"category": "Music", "count": 4}
        assert [row["count"] for row in rows] == sorted(
            (row["count"] for row in rows), reverse=True
        )
        assert "Chess" not in [row["category"] for row in rows]


class TestExchangeLifecycle:
    """Exchange creation, acceptance and the skill cascade."""

    def test_client_status_is_ignored_and_accept_retires_skills(self, store_client):
        creator_skill = create_skill(store_client, title="Guitar")
        application_skill = create_skill(store_client, title="Spanish", creatorEmail=BEN)

        response = store_client.post(
            "/exchanges",
            json={
                "title": "Guitar for Spanish",
                "creatorEmail": ANA,
                "applicationUserEmail": BEN,
                "creatorSkillId": creator_skill,
                "applicationSkillId": application_skill,
                "status": "Accepted",
            },
        )
        exchange_id = response.json()["insertedId"]

        listed = store_client.get(f"/exchanges/{ANA}").json()
        assert listed["requests"][0]["status"] == "Pending"
        assert store_client.get(f"/accepted-exchanges/{ANA}").json() == []
        assert store_client.get(f"/get-skill/{creator_skill}").json()["available"] is True

        response = store_client.patch(f"/exchanges/{exchange_id}", json={"status": "Accepted"})

        assert response.status_code == 200
        for skill_id in (creator_skill, application_skill):
            assert store_client.get(f"/get-skill/{skill_id}").json()["available"] is False
        accepted = store_client.get(f"/accepted-exchanges/{BEN}").json()
        assert [exchange["_id"] for exchange in accepted] == [exchange_id]

    def test_accepted_exchange_never_changes(self, store_client):
        creator_skill = create_skill(store_client)
        application_skill = create_skill(store_client, creatorEmail=BEN)
        exchange_id = store_client.post(
            "/exchanges",
            json={
                "title": "Swap",
                "creatorEmail": ANA,
                "applicationUserEmail": BEN,
                "creatorSkillId": creator_skill,
                "applicationSkillId": application_skill,
            },
        ).json()["insertedId"]
        store_client.patch(f"/exchanges/{exchange_id}", json={"status": "Accepted"})

        response = store_client.patch(f"/exchanges/{exchange_id}", json={"status": "Rejected"})

        assert response.status_code == 400
        assert response.json() == {"message": "Exchange already accepted"}
        listed = store_client.get(f"/exchanges/{ANA}").json()
        assert listed["requests"][0]["status"] == "Accepted"
        assert store_client.get(f"/get-skill/{creator_skill}").json()["available"] is False


class TestFeedback:
    """One review per reviewer and skill."""

    def test_second_review_is_rejected(self, store_client):
        skill_id = create_skill(store_client)
        review = {"reviewerEmail": BEN, "skillId": skill_id, "rating": 5}

        first = store_client.post("/review", json=review)
        second = store_client.post("/review", json={**review, "rating": 1})

        assert first.status_code == 200
        assert second.status_code == 400
        assert second.json() == {"message": "You have already reviewed this skill"}
        reviews = store_client.get(f"/reviews-and-reports/{skill_id}").json()["reviews"]
        assert len(reviews) == 1
        assert reviews[0]["rating"] == 5


class TestUsers:
    """Create-or-fetch user registration."""

    def test_registration_is_idempotent(self, store_client):
        first = store_client.post(f"/users/{ANA}", json={"name": "Ana"}).json()
        second = store_client.post(f"/users/{ANA}", json={"name": "Someone else"}).json()

        assert second["_id"] == first["_id"]
        assert second["name"] == "Ana"
        assert len(store_client.get("/allUsers").json()) == 1


class TestSavedSkills:
    """Saving and removing saved skills."""

    def save(self, client, skill_id, email):
        response = client.post(
            "/save-skill",
            json={"skillId": skill_id, "savedUserEmail": email, "skillTitle": "Guitar"},
        )
        assert response.status_code == 200

    def test_delete_for_one_user_keeps_other_users_entries(self, store_client):
        skill_id = create_skill(store_client)
        self.save(store_client, skill_id, ANA)
        self.save(store_client, skill_id, BEN)

        response = store_client.delete(f"/delete-saved-skill/{skill_id}", params={"email": ANA})

        assert response.json()["deletedCount"] == 1
        assert store_client.get("/get-saved-skills", params={"email": ANA}).json()["total"] == 0
        assert store_client.get("/get-saved-skills", params={"email": BEN}).json()["total"] == 1

    def test_delete_without_email_removes_one_entry(self, store_client):
        skill_id = create_skill(store_client)
        self.save(store_client, skill_id, ANA)
        self.save(store_client, skill_id, BEN)

        response = store_client.delete(f"/delete-saved-skill/{skill_id}")

        assert response.json()["deletedCount"] == 1
        remaining = sum(
            store_client.get("/get-saved-skills", params={"email": email}).json()["total"]
            for email in (ANA, BEN)
        )
        assert remaining == 1

    def test_delete_missing_entry(self, store_client):
        response = store_client.delete("/delete-saved-skill/64b7f0c2a1b2c3d4e5f60718")

        assert response.status_code == 200
        assert response.json() == {"acknowledged": True, "deletedCount": 0}
