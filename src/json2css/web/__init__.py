"""HTTP front end for the encoder."""

from json2css.web.app import create_app

__all__ = ["create_app"]
