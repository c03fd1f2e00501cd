"""Health & Error Probes — fixed responses on / and /500.

Tests cover:
    - GET / returns 200 "ok" as plain text
    - GET /500 returns 500 "internal server error"
    - Neither probe touches the YouTube client
"""


async def test_root_returns_ok(client):
    res = await client.get("/")
    assert res.status_code == 200
    assert res.text == "ok"
    assert res.headers["content-type"].startswith("text/plain")


async def test_forced_error_returns_500(client):
    res = await client.get("/500")
    assert res.status_code == 500
    assert res.text == "internal server error"


async def test_probes_do_not_call_youtube(client, youtube):
    await client.get("/")
    await client.get("/500")
    assert youtube.calls == []


async def test_probes_are_stable_across_calls(client):
    for _ in range(3):
        assert (await client.get("/")).text == "ok"
        assert (await client.get("/500")).status_code == 500
