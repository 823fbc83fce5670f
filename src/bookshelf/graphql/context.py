"""
Helpers for reading request-scoped state out of the GraphQL context
"""

from typing import Any

import strawberry

from ..catalog import Catalog, default_catalog


def get_catalog_from_info(info: strawberry.Info) -> Catalog:
    """Return the catalog supplied in the context, or the default catalog."""
    context: Any = info.context
    if isinstance(context, dict):
        catalog = context.get("catalog")
        if catalog is not None:
            return catalog
    return default_catalog
