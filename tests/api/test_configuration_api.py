"""Tests for stage, section and question configuration endpoints (memory backend)."""

from httpx import AsyncClient


async def _put(client: AsyncClient, path: str, body: dict):
    return await client.put(f"/api/v1{path}", json=body)


async def test_put_and_get_question(client: AsyncClient) -> None:
    response = await _put(
        client,
        "/questions/q1",
        {
            "label": "System size (kW)",
            "question_type": "number",
            "mapped_field": "project.system_size",
        },
    )
    assert response.status_code == 200
    body = response.json()
    assert body["id"] == "q1"
    assert body["data_type"] == "number"

    response = await client.get("/api/v1/questions/q1")
    assert response.status_code == 200
    assert response.json()["label"] == "System size (kW)"


async def test_get_unknown_question_returns_404(client: AsyncClient) -> None:
    response = await client.get("/api/v1/questions/nope")
    assert response.status_code == 404
    assert response.json()["error"] == "RESOURCE_NOT_FOUND"


async def test_invalid_operator_returns_422(client: AsyncClient) -> None:
    response = await _put(
        client,
        "/questions/q1",
        {
            "label": "Battery",
            "conditional_rule": {"field": "project.x", "operator": "between", "value": 1},
        },
    )
    assert response.status_code == 422
    assert response.json()["error"] == "VALIDATION_ERROR"


async def test_section_cycle_is_rejected_with_messages(client: AsyncClient) -> None:
    assert (await _put(client, "/sections/a", {"name": "A"})).status_code == 200
    assert (
        await _put(client, "/sections/b", {"name": "B", "depends_on_section_ids": ["a"]})
    ).status_code == 200
    assert (
        await _put(client, "/sections/c", {"name": "C", "depends_on_section_ids": ["b"]})
    ).status_code == 200

    response = await _put(client, "/sections/a", {"name": "A", "depends_on_section_ids": ["c"]})
    assert response.status_code == 422
    body = response.json()
    assert body["error"] == "CONFIGURATION_ERROR"
    assert body["details"]["errors"][0].startswith("Circular dependency detected")

    stored = (await client.get("/api/v1/sections/a")).json()
    assert stored["depends_on_section_ids"] == []


async def test_section_with_unknown_question_is_rejected(client: AsyncClient) -> None:
    response = await _put(
        client, "/sections/a", {"name": "A", "required_question_ids": ["ghost"]}
    )
    assert response.status_code == 422
    assert response.json()["details"]["errors"] == ['Required question ID "ghost" does not exist.']


async def test_stages_listed_by_order(client: AsyncClient) -> None:
    await _put(client, "/stages/install", {"name": "Installation", "order": 2})
    await _put(client, "/stages/survey", {"name": "Site Survey", "order": 1})
    response = await client.get("/api/v1/stages")
    assert [s["id"] for s in response.json()] == ["survey", "install"]


async def test_delete_referenced_section_returns_409(client: AsyncClient) -> None:
    await _put(client, "/sections/a", {"name": "Site"})
    await _put(client, "/stages/s1", {"name": "Survey", "section_ids": ["a"]})

    response = await client.delete("/api/v1/sections/a")
    assert response.status_code == 409
    assert response.json()["details"]["blocking_items"] == ["Stage: Survey"]

    assert (await client.delete("/api/v1/stages/s1")).status_code == 204
    assert (await client.delete("/api/v1/sections/a")).status_code == 204
    assert (await client.get("/api/v1/sections/a")).status_code == 404


async def test_delete_question_strips_sections(client: AsyncClient) -> None:
    await _put(client, "/questions/q1", {"label": "Roof"})
    await _put(client, "/sections/a", {"name": "Roof", "required_question_ids": ["q1"]})

    assert (await client.delete("/api/v1/questions/q1")).status_code == 204
    section = (await client.get("/api/v1/sections/a")).json()
    assert section["required_question_ids"] == []
