"""Inkfolio - blog and portfolio API.

Keep this package import side-effect free: importing `inkfolio.*` should not
build the FastAPI app or open a database engine.
"""

__version__ = "1.0.0"

__all__ = ["create_app"]


def create_app(settings=None):
	from .server import create_app as _create_app

	return _create_app(settings)
