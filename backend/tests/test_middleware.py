import asyncio

from fastapi import FastAPI
from fastapi.testclient import TestClient

from tradeslink.middleware import RequestTimeoutMiddleware


def _app(timeout):
    app = FastAPI()
    app.add_middleware(RequestTimeoutMiddleware, timeout_seconds=timeout)

    @app.get("/slow")
    async def slow():
        await asyncio.sleep(0.5)
        return {"ok": True}

    return app


class TestRequestTimeout:
    def test_slow_request_times_out(self):
        r = TestClient(_app(0.05)).get("/slow")
        assert r.status_code == 504
        assert r.json()["error"] == "RequestTimeout"

    def test_fast_request_passes(self):
        r = TestClient(_app(5)).get("/slow")
        assert r.status_code == 200
        assert r.json() == {"ok": True}


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"
