# Este archivo marca el paquete fake_redmine y expone la versión del proyecto.

"""
Fake Redmine - a stand-in Redmine API server for client integration tests.

Serves the issue status listing and accepts issue updates without state.
"""

__version__ = "0.1.0"
__description__ = "Fake Redmine API server for client integration tests"

from .server import create_app, main

__all__ = ["create_app", "main", "__version__"]
