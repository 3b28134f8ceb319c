# Este archivo registra la ruta que lista los estados de incidencia.

"""
Routes for the issue status listing.
"""
from fastapi import FastAPI  # Framework FastAPI para registro de rutas

from ..models.issue_status import IssueStatusList, issue_status_list  # Modelo y tabla de estados


def register_status_routes(app: FastAPI) -> None:
    """
    Register issue status routes.

    Args:
        app: FastAPI application instance
    """

    @app.get("/issue_statuses.json", response_model=IssueStatusList)
    async def list_issue_statuses() -> IssueStatusList:
        """
        List all issue statuses.

        Query string and headers are ignored; the document never changes.
        """
        return issue_status_list()
