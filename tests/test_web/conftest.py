from __future__ import annotations

import pytest

from json2css.web.app import create_app


@pytest.fixture
def app():
    """Create a Flask app for testing."""
    application = create_app()
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    """Create a test client."""
    return app.test_client()


@pytest.fixture
def strict_client():
    """Test client for an app that rejects rulesets without selectors."""
    application = create_app({"JSON2CSS_STRICT_SELECTORS": True, "TESTING": True})
    return application.test_client()
