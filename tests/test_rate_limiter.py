import pytest


@pytest.fixture
def limited_settings(settings):
    return settings.model_copy(
        update={
            "rate_limit_enabled": True,
            "rate_limit_window_seconds": 60,
            "rate_limit_max_general": 3,
            "rate_limit_max_strict": 1,
        }
    )


@pytest.mark.asyncio
async def test_general_limit_applies_to_reads(make_client, limited_settings):
    async with make_client(limited_settings) as client:
        statuses = [(await client.get("/health")).status_code for _ in range(3)]
        blocked = await client.get("/players")

    assert statuses == [200, 200, 200]
    assert blocked.status_code == 429
    assert 0 < int(blocked.headers["retry-after"]) <= 60
    assert blocked.json() == {"status": 429, "error": "Too many requests. Please try again later."}


@pytest.mark.asyncio
async def test_strict_limit_applies_to_writes(make_client, limited_settings):
    async with make_client(limited_settings) as client:
        first = await client.delete("/players/999")
        second = await client.delete("/players/999")

    assert first.status_code == 404
    assert second.status_code == 429
    assert second.json()["error"] == "Too many write requests. Please try again later."


@pytest.mark.asyncio
async def test_general_and_strict_limits_count_separately(make_client, limited_settings):
    same_limits = limited_settings.model_copy(
        update={"rate_limit_max_general": 2, "rate_limit_max_strict": 2}
    )
    async with make_client(same_limits) as client:
        statuses = [(await client.delete("/players/999")).status_code for _ in range(3)]

    assert statuses == [404, 404, 429]


@pytest.mark.asyncio
async def test_allowed_responses_carry_rate_limit_headers(make_client, limited_settings):
    async with make_client(limited_settings) as client:
        response = await client.get("/health")

    assert response.headers["ratelimit-limit"] == "3"
    assert response.headers["ratelimit-remaining"] == "2"


@pytest.mark.asyncio
async def test_disabled_limiter_lets_everything_through(client):
    for _ in range(5):
        response = await client.get("/health")
        assert response.status_code == 200
        assert "ratelimit-limit" not in response.headers
