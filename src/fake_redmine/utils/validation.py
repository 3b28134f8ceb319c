"""
Validation for the static data the server hands out.
"""
from typing import Sequence  # Type hints para secuencias

from ..exceptions import StatusCatalogError  # Excepción personalizada para la tabla de estados


def validate_status_table(statuses: Sequence) -> Sequence:
    """
    Validate the issue status table.

    Args:
        statuses: Sequence of objects with ``id`` and ``name`` attributes

    Returns:
        The same sequence, unchanged

    Raises:
        StatusCatalogError: If the table is empty, or ids/names are invalid or repeated
    """
    if not statuses:
        raise StatusCatalogError("Issue status table is empty")

    seen_ids = set()
    seen_names = set()

    for status in statuses:
        if status.id <= 0:
            raise StatusCatalogError(
                f"Issue status id must be positive: {status.id}",
                context={"id": status.id, "name": status.name}
            )

        if not status.name or not status.name.strip():
            raise StatusCatalogError(
                "Issue status name cannot be blank",
                context={"id": status.id}
            )

        if status.id in seen_ids:
            raise StatusCatalogError(
                f"Duplicate issue status id: {status.id}",
                context={"id": status.id}
            )

        if status.name in seen_names:
            raise StatusCatalogError(
                f"Duplicate issue status name: {status.name}",
                context={"name": status.name}
            )

        seen_ids.add(status.id)
        seen_names.add(status.name)

    return statuses
