# Este archivo permite ejecutar el servidor como módulo Python usando: python -m fake_redmine

"""
Entry point for running the fake Redmine server as a Python module.

Usage:
    python -m fake_redmine [--host HOST] [--port PORT]
"""

from .server import main

if __name__ == "__main__":
    main()
