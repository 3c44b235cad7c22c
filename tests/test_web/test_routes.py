from __future__ import annotations

from json2css import EncoderConfig, __version__

SPAN_RED = [
    {
        "ruleset": {
            "selectors": [{"simple": {"element": "span"}}],
            "declarations": [{"property": "color", "value": ["red"]}],
        }
    }
]


class TestAppFactory:
    def test_config_defaults(self, app):
        config = app.extensions["json2css_config"]
        assert isinstance(config, EncoderConfig)
        assert config.require_selectors is False
        assert config.max_depth == 64

    def test_config_overrides(self):
        from json2css.web.app import create_app

        app = create_app({"JSON2CSS_MAX_DEPTH": 8})
        assert app.extensions["json2css_config"].max_depth == 8


class TestHealth:
    def test_health(self, client):
        resp = client.get("/api/health")
        assert resp.status_code == 200
        assert resp.get_json() == {"status": "ok", "version": __version__}


class TestEncodeEndpoint:
    def test_encode(self, client):
        resp = client.post("/api/encode", json=SPAN_RED)
        assert resp.status_code == 200
        assert resp.mimetype == "text/css"
        assert resp.data == b"span{color:red};"

    def test_cors_headers(self, client):
        resp = client.post("/api/encode", json=SPAN_RED)
        assert resp.headers["Access-Control-Allow-Origin"] == "*"

    def test_preflight(self, client):
        resp = client.options("/api/encode")
        assert resp.status_code == 204

    def test_missing_body(self, client):
        resp = client.post("/api/encode", data="nope", content_type="text/plain")
        assert resp.status_code == 400
        assert resp.get_json()["kind"] == "DecodeError"

    def test_missing_declarations(self, client):
        payload = [{"ruleset": {"selectors": [{"simple": {"element": "p"}}], "declarations": []}}]
        resp = client.post("/api/encode", json=payload)
        assert resp.status_code == 400
        assert resp.get_json()["kind"] == "MissingDeclarationError"

    def test_unknown_atrule(self, client):
        resp = client.post("/api/encode", json=[{"atrule": {"ident": {"type": "unknown"}}}])
        assert resp.status_code == 400
        body = resp.get_json()
        assert body["kind"] == "UnknownIdentifierTypeError"
        assert "unknown" in body["error"]

    def test_strict_selectors(self, strict_client):
        payload = [{"ruleset": {"declarations": [{"property": "color", "value": ["red"]}]}}]
        resp = strict_client.post("/api/encode", json=payload)
        assert resp.status_code == 400
        assert resp.get_json()["kind"] == "MissingSelectorError"

    def test_deeply_nested_json(self, client):
        deep = "[" * 100000 + "]" * 100000
        resp = client.post("/api/encode", data=deep, content_type="application/json")
        assert resp.status_code == 400
        body = resp.get_json()
        assert body["kind"] == "DecodeError"
        assert "nested too deeply" in body["error"]
