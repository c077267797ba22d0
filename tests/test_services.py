"""서비스 API 테스트 — 목록/개수/인기/내 서비스/단건/생성/수정/삭제/검색.

Service API tests: pagination, count, popular slice, provider listing,
lookup, create, full-field update with upsert, delete and name search.
"""

import uuid

from httpx import AsyncClient
from sqlalchemy import select

from home_repair.models import Service
from home_repair.repositories.service_repository import escape_like
from tests.conftest import PROVIDER_A, PROVIDER_B, auth_cookie, make_token

NEW_SERVICE = {
    "serviceName": "Gutter Cleaning",
    "providerEmail": PROVIDER_A,
    "providerName": "Provider A",
    "imageUrl": "https://img.example/gutter.png",
    "price": 35,
    "serviceArea": "Sylhet",
    "description": "Leaves and debris removed from gutters.",
}

UPDATE_FIELDS = {
    "serviceName": "Pipe Fixing Deluxe",
    "imageUrl": "https://img.example/new.png",
    "price": 99.5,
    "serviceArea": "Khulna",
    "description": "Updated description",
}


class TestServiceListing:
    """서비스 목록 테스트."""

    async def test_pagination_second_page(self, client: AsyncClient, services):
        """page=2, limit=2 → 저장 순서상 2, 3번째 문서."""
        res = await client.get("/all-services", params={"page": 2, "limit": 2})
        assert res.status_code == 200
        names = [s["serviceName"] for s in res.json()]
        assert names == [services[2].service_name, services[3].service_name]

    async def test_default_page_and_limit(self, client: AsyncClient, services):
        """기본값 page=1, limit=2."""
        res = await client.get("/all-services")
        assert [s["_id"] for s in res.json()] == [str(services[0].id), str(services[1].id)]

    async def test_large_limit_unbounded(self, client: AsyncClient, services):
        """limit 상한 없음."""
        res = await client.get("/all-services", params={"limit": 1000})
        assert len(res.json()) == len(services)

    async def test_page_past_end(self, client: AsyncClient, services):
        """마지막 페이지 이후는 빈 목록."""
        res = await client.get("/all-services", params={"page": 50, "limit": 2})
        assert res.status_code == 200
        assert res.json() == []

    async def test_invalid_page(self, client: AsyncClient):
        """page=0은 400."""
        res = await client.get("/all-services", params={"page": 0})
        assert res.status_code == 400

    async def test_page_out_of_range(self, client: AsyncClient, services):
        """오프셋 범위를 넘는 page는 500이 아닌 400."""
        res = await client.get("/all-services", params={"page": 10**19, "limit": 2})
        assert res.status_code == 400
        assert res.json()["message"] == "Invalid request"

    async def test_limit_out_of_range(self, client: AsyncClient, services):
        res = await client.get("/all-services", params={"limit": 10**10})
        assert res.status_code == 400

    async def test_largest_page_and_limit(self, client: AsyncClient, services):
        """상한값 자체는 허용되고 빈 목록."""
        res = await client.get(
            "/all-services", params={"page": 1_000_000_000, "limit": 1_000_000_000}
        )
        assert res.status_code == 200
        assert res.json() == []

    async def test_camel_case_shape(self, client: AsyncClient, services):
        """응답 필드는 camelCase, ID는 _id."""
        doc = (await client.get("/all-services", params={"limit": 1})).json()[0]
        assert set(doc) >= {
            "_id", "providerEmail", "serviceName", "imageUrl", "price", "serviceArea", "description",
        }

    async def test_count(self, client: AsyncClient, services):
        """전체 개수."""
        res = await client.get("/service-count")
        assert res.json() == {"count": len(services)}

    async def test_count_empty(self, client: AsyncClient):
        res = await client.get("/service-count")
        assert res.json() == {"count": 0}

    async def test_popular_limited_to_six(self, client: AsyncClient, services):
        """인기 서비스는 저장 순서상 앞의 6개."""
        res = await client.get("/popular-services")
        ids = [s["_id"] for s in res.json()]
        assert ids == [str(s.id) for s in services[:6]]


class TestMyServices:
    """제공자 본인 서비스 테스트."""

    async def test_only_own_services(self, client: AsyncClient, services):
        """본인 providerEmail의 서비스만 반환."""
        res = await client.get(
            "/my-services", params={"email": PROVIDER_B}, headers=auth_cookie(make_token(PROVIDER_B))
        )
        assert res.status_code == 200
        data = res.json()
        assert len(data) == 3
        assert all(s["providerEmail"] == PROVIDER_B for s in data)

    async def test_end_to_end_cookie_flow(self, client: AsyncClient, services):
        """POST /jwt 쿠키로 본인 조회 200, 타인 조회 403."""
        res = await client.post("/jwt", json={"email": PROVIDER_A})
        assert res.status_code == 200

        res = await client.get("/my-services", params={"email": PROVIDER_A})
        assert res.status_code == 200
        assert len(res.json()) == 5
        assert {s["providerEmail"] for s in res.json()} == {PROVIDER_A}

        res = await client.get("/my-services", params={"email": PROVIDER_B})
        assert res.status_code == 403


class TestServiceDetail:
    """서비스 단건 조회 테스트."""

    async def test_get_by_id(self, client: AsyncClient, services):
        res = await client.get(f"/services/{services[0].id}")
        assert res.status_code == 200
        assert res.json()["serviceName"] == "Pipe Fixing"

    async def test_get_missing(self, client: AsyncClient):
        """존재하지 않는 ID는 404."""
        res = await client.get(f"/services/{uuid.uuid4()}")
        assert res.status_code == 404
        assert res.json() == {"message": "Service not found"}

    async def test_get_malformed_id(self, client: AsyncClient):
        """형식이 잘못된 ID는 404가 아닌 400."""
        res = await client.get("/services/not-an-id")
        assert res.status_code == 400


class TestServiceCreate:
    """서비스 생성 테스트."""

    async def test_add_service(self, client: AsyncClient, db):
        res = await client.post("/add-service", json=NEW_SERVICE)
        assert res.status_code == 201
        body = res.json()
        assert body["acknowledged"] is True

        created = await db.get(Service, uuid.UUID(body["insertedId"]))
        assert created is not None
        assert created.provider_email == PROVIDER_A
        assert created.service_area == "Sylhet"

    async def test_added_service_is_fetchable(self, client: AsyncClient):
        res = await client.post("/add-service", json=NEW_SERVICE)
        service_id = res.json()["insertedId"]
        res = await client.get(f"/services/{service_id}")
        assert res.json()["serviceName"] == "Gutter Cleaning"

    async def test_missing_required_field(self, client: AsyncClient):
        """providerEmail 누락 시 400."""
        payload = {k: v for k, v in NEW_SERVICE.items() if k != "providerEmail"}
        res = await client.post("/add-service", json=payload)
        assert res.status_code == 400

    async def test_negative_price(self, client: AsyncClient):
        res = await client.post("/add-service", json={**NEW_SERVICE, "price": -1})
        assert res.status_code == 400


class TestServiceUpdate:
    """서비스 수정 테스트."""

    async def test_update_existing(self, client: AsyncClient, services, db):
        """설명 필드 5종 교체, providerEmail 유지."""
        target = services[0]
        res = await client.put(f"/update-service/{target.id}", json=UPDATE_FIELDS)
        assert res.status_code == 200
        assert res.json() == {
            "acknowledged": True,
            "matchedCount": 1,
            "modifiedCount": 1,
            "upsertedCount": 0,
            "upsertedId": None,
        }

        doc = (await client.get(f"/services/{target.id}")).json()
        assert doc["serviceName"] == "Pipe Fixing Deluxe"
        assert doc["price"] == 99.5
        assert doc["providerEmail"] == PROVIDER_A

    async def test_update_same_values(self, client: AsyncClient, services):
        """같은 값으로 수정 시 modifiedCount 0."""
        target = services[0]
        same = {
            "serviceName": target.service_name,
            "imageUrl": target.image_url,
            "price": target.price,
            "serviceArea": target.service_area,
            "description": target.description,
        }
        res = await client.put(f"/update-service/{target.id}", json=same)
        assert res.json()["matchedCount"] == 1
        assert res.json()["modifiedCount"] == 0

    async def test_update_missing_upserts(self, client: AsyncClient, db):
        """존재하지 않는 ID 수정 시 해당 필드만으로 새 문서 생성 (404 아님)."""
        new_id = uuid.uuid4()
        res = await client.put(f"/update-service/{new_id}", json=UPDATE_FIELDS)
        assert res.status_code == 200
        body = res.json()
        assert body["matchedCount"] == 0
        assert body["upsertedCount"] == 1
        assert body["upsertedId"] == str(new_id)

        doc = (await client.get(f"/services/{new_id}")).json()
        assert doc["serviceName"] == "Pipe Fixing Deluxe"
        assert doc["providerEmail"] is None

    async def test_update_invalid_body(self, client: AsyncClient, services):
        res = await client.put(f"/update-service/{services[0].id}", json={"price": 5})
        assert res.status_code == 400

    async def test_update_requires_service_area(self, client: AsyncClient, services):
        """생성 시 필수인 serviceArea는 수정으로도 비울 수 없음."""
        body = {k: v for k, v in UPDATE_FIELDS.items() if k != "serviceArea"}
        res = await client.put(f"/update-service/{services[0].id}", json=body)
        assert res.status_code == 400

        res = await client.put(
            f"/update-service/{services[0].id}", json={**UPDATE_FIELDS, "serviceArea": None}
        )
        assert res.status_code == 400

        doc = (await client.get(f"/services/{services[0].id}")).json()
        assert doc["serviceArea"] == services[0].service_area


class TestServiceDelete:
    """서비스 삭제 테스트."""

    async def test_delete(self, client: AsyncClient, services, db):
        target_id = services[0].id
        res = await client.delete(f"/delete-service/{target_id}")
        assert res.status_code == 200
        assert res.json() == {"acknowledged": True, "deletedCount": 1}

        result = await db.execute(select(Service).where(Service.id == target_id))
        assert result.scalar_one_or_none() is None

    async def test_delete_missing(self, client: AsyncClient):
        """존재하지 않는 ID 삭제는 오류가 아닌 0건."""
        res = await client.delete(f"/delete-service/{uuid.uuid4()}")
        assert res.status_code == 200
        assert res.json()["deletedCount"] == 0


class TestServiceSearch:
    """서비스 이름 검색 테스트."""

    async def test_case_insensitive_substring(self, client: AsyncClient, services):
        """"Pipe Fixing"은 pipe, PIPE, ix 모두에 일치."""
        for query in ("pipe", "PIPE", "ix"):
            res = await client.get(f"/search-services/{query}")
            names = [s["serviceName"] for s in res.json()]
            assert "Pipe Fixing" in names, query

    async def test_no_match(self, client: AsyncClient, services):
        res = await client.get("/search-services/plumbing")
        assert res.json() == []

    async def test_empty_query_matches_all(self, client: AsyncClient, services):
        res = await client.get("/search-services")
        assert len(res.json()) == len(services)

    async def test_wildcards_are_literal(self, client: AsyncClient, db):
        """% 와 _ 는 와일드카드가 아닌 문자 그대로 검색."""
        db.add_all([
            Service(service_name="100% Satisfaction Cleaning", provider_email=PROVIDER_A, price=1),
            Service(service_name="Plain Cleaning", provider_email=PROVIDER_A, price=1),
            Service(service_name="snake_case repair", provider_email=PROVIDER_A, price=1),
        ])
        await db.commit()

        res = await client.get("/search-services/%25")
        assert [s["serviceName"] for s in res.json()] == ["100% Satisfaction Cleaning"]

        res = await client.get("/search-services/_")
        assert [s["serviceName"] for s in res.json()] == ["snake_case repair"]

    def test_escape_like(self):
        assert escape_like("50%_off!") == "50!%!_off!!"
        assert escape_like("plain") == "plain"
