# API Package
from kiwiland.api.app import create_app
from kiwiland.api.routes import router

__all__ = ["create_app", "router"]
