# Transport Layer
# HTTP surface of the wallboard: routing, CORS, error responses

from wallboard.transport.app import app, create_app

__all__ = ["app", "create_app"]
