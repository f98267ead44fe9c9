import pytest
from typing import Any, Dict
from httpx import AsyncClient, Response


@pytest.mark.asyncio
async def test_health(client: AsyncClient) -> None:
    resp: Response = await client.get("/health")
    body: Dict[str, Any] = resp.json()
    assert resp.status_code == 200
    assert body["status"] == "ok"


@pytest.mark.asyncio
async def test_version(client: AsyncClient) -> None:
    resp: Response = await client.get("/version")
    assert resp.status_code == 200
    assert "version" in resp.json()


@pytest.mark.asyncio
async def test_graphql_health(client: AsyncClient) -> None:
    query: Dict[str, str] = {"query": "{ health }"}
    resp: Response = await client.post("/graphql", json=query)
    data: Dict[str, Any] = resp.json()["data"]
    assert data["health"] == "ok"


@pytest.mark.asyncio
async def test_graphql_calculate_bmi(client: AsyncClient) -> None:
    query: Dict[str, str] = {
        "query": """
        {
          bmi {
            calculate(input: {weight: "45", height: "160", age: "25",
                              gender: "Female"}) {
              success
              result { bmi category status }
            }
          }
        }
        """
    }
    resp: Response = await client.post("/graphql", json=query)
    payload: Dict[str, Any] = resp.json()["data"]["bmi"]["calculate"]
    assert payload["success"] is True
    assert payload["result"] == {
        "bmi": 17.58,
        "category": "UNDERWEIGHT",
        "status": "Needs Attention",
    }
