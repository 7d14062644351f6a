"""Rate limiting middleware tests against a dedicated app."""

from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.middleware import RateLimiter, RateLimitMiddleware, SecurityHeadersMiddleware


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def build_app(limiter: RateLimiter) -> FastAPI:
    app = FastAPI()
    app.add_middleware(RateLimitMiddleware, limiter=limiter)
    app.add_middleware(SecurityHeadersMiddleware)

    @app.get("/ping")
    async def ping():
        return {"pong": True}

    return app


def test_limiter_counts_per_key():
    limiter = RateLimiter(limit=2, window_seconds=60, clock=FakeClock())
    assert limiter.hit("a")[0] is True
    assert limiter.hit("a")[0] is True
    assert limiter.hit("a")[0] is False
    assert limiter.hit("b")[0] is True


def test_limiter_window_resets():
    clock = FakeClock()
    limiter = RateLimiter(limit=1, window_seconds=60, clock=clock)
    assert limiter.hit("a") == (True, 0, 60)
    assert limiter.hit("a")[0] is False

    clock.now += 60
    assert limiter.hit("a")[0] is True


def test_middleware_returns_429_after_limit():
    clock = FakeClock()
    client = TestClient(build_app(RateLimiter(limit=2, window_seconds=900, clock=clock)))

    first = client.get("/ping")
    assert first.status_code == 200
    assert first.headers["RateLimit-Limit"] == "2"
    assert first.headers["RateLimit-Remaining"] == "1"

    assert client.get("/ping").status_code == 200

    blocked = client.get("/ping")
    assert blocked.status_code == 429
    assert blocked.json()["success"] is False
    assert blocked.headers["Retry-After"] == "900"
    assert blocked.headers["X-Content-Type-Options"] == "nosniff"

    clock.now += 900
    assert client.get("/ping").status_code == 200
