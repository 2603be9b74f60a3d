"""
Quest API package.

An in-memory quest tracker served over FastAPI. The application is built by
quest_api.main.create_app(); quest_api.main.app is the default ASGI instance.
"""

__version__ = "0.1.0"
