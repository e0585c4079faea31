"""
Тесты цепочки middleware
"""

import logging

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from apiutil import recovery
from apiutil import ApiResponse
from comment_api.core.middleware import create_stack

METHOD_NOT_ALLOWED_BODY = {"status": "NotOK", "msg": "Method not allowed", "data": None}


class TestMethodNotAllowed:

    @pytest.mark.parametrize("method, path", [
        ("PATCH", "/v1/api/comment"),
        ("DELETE", "/v1/api/comment"),
        ("POST", "/v1/api/comment/1"),
        ("PATCH", "/v1/api/comment/1"),
        ("POST", "/v1/api/health"),
    ])
    def test_undeclared_method_returns_json_body(self, client, method, path):
        response = client.request(method, path)

        assert response.status_code == 405
        assert response.headers["content-type"] == "application/json"
        assert response.json() == METHOD_NOT_ALLOWED_BODY
        assert "allow" in response.headers

    def test_unknown_path_is_not_rewritten(self, client):
        response = client.get("/v1/api/unknown")

        assert response.status_code == 404
        assert response.json() != METHOD_NOT_ALLOWED_BODY


class TestCreateStack:

    def test_outer_to_inner_order(self):
        calls = []

        def recorder(name):
            async def middleware(request, call_next):
                calls.append(f"{name}:in")
                response = await call_next(request)
                calls.append(f"{name}:out")
                return response
            return middleware

        app = FastAPI(middleware=create_stack(recorder("outer"), recorder("inner")))

        @app.get("/ping")
        async def ping():
            calls.append("handler")
            return {"pong": True}

        with TestClient(app) as client:
            response = client.get("/ping")

        assert response.status_code == 200
        assert calls == ["outer:in", "inner:in", "handler", "inner:out", "outer:out"]

    def test_method_not_allowed_always_installed(self):
        app = FastAPI(middleware=create_stack())

        @app.get("/only-get")
        async def only_get():
            return {}

        with TestClient(app) as client:
            response = client.put("/only-get")

        assert response.status_code == 405
        assert response.json() == METHOD_NOT_ALLOWED_BODY

    def test_other_statuses_pass_through(self):
        app = FastAPI(middleware=create_stack())

        @app.get("/teapot", status_code=418)
        async def teapot():
            return {"tea": True}

        with TestClient(app) as client:
            response = client.get("/teapot")

        assert response.status_code == 418
        assert response.json() == {"tea": True}


class TestUnpanic:

    @pytest.fixture
    def panicking_client(self, app):
        @app.get("/v1/api/boom")
        async def boom():
            raise RuntimeError("something broke")

        with TestClient(app) as test_client:
            yield test_client

    @pytest.fixture
    def sent_reports(self, monkeypatch):
        reports = []

        async def fake_call(url, request, client=None):
            reports.append((url, request))
            return ApiResponse(status_code=200, body=b"{}")

        monkeypatch.setattr(recovery, "call_api_without_token", fake_call)
        return reports

    def test_panic_returns_500_envelope(self, panicking_client, sent_reports, monkeypatch):
        monkeypatch.delenv("SERVICE_PANIC_LOG_URL", raising=False)

        response = panicking_client.get("/v1/api/boom")

        assert response.status_code == 500
        assert response.json() == {"status": "NotOK", "msg": "something broke", "data": None}
        assert sent_reports == []

    def test_panic_is_reported(self, panicking_client, sent_reports, monkeypatch):
        monkeypatch.setenv("SERVICE_PANIC_LOG_URL", "https://logs.test/panic")

        response = panicking_client.get("/v1/api/boom")

        assert response.status_code == 500
        assert len(sent_reports) == 1
        url, report = sent_reports[0]
        assert url == "https://logs.test/panic"
        assert report["errorMessage"] == "something broke"
        assert "RuntimeError" in report["stackTrace"]
        assert report["serviceName"]

    def test_report_failure_does_not_affect_response(
        self, panicking_client, monkeypatch, caplog
    ):
        async def failing_call(url, request, client=None):
            raise ConnectionError("log service down")

        monkeypatch.setattr(recovery, "call_api_without_token", failing_call)
        monkeypatch.setenv("SERVICE_PANIC_LOG_URL", "https://logs.test/panic")

        with caplog.at_level(logging.ERROR, logger="apiutil.recovery"):
            response = panicking_client.get("/v1/api/boom")

        assert response.status_code == 500
        assert response.json()["msg"] == "something broke"
        assert "log service down" in caplog.text

    def test_server_keeps_serving_after_panic(self, panicking_client, sent_reports):
        panicking_client.get("/v1/api/boom")

        response = panicking_client.get("/v1/api/health")

        assert response.status_code == 200
