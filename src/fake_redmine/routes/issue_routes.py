# Este archivo registra la ruta de actualización de incidencias, que acepta
# cualquier petición sin modificar ningún estado.

"""
Routes for issue updates.
"""
from fastapi import FastAPI, Response  # Framework FastAPI para registro de rutas


def register_issue_routes(app: FastAPI) -> None:
    """
    Register issue update routes.

    Args:
        app: FastAPI application instance
    """

    @app.put("/issues/{issue_id}.json")
    async def update_issue(issue_id: str) -> Response:
        """
        Accept an issue update.

        Neither ``issue_id`` nor the payload is validated; the request is
        only visible through the request log.
        """
        return Response(status_code=200)
