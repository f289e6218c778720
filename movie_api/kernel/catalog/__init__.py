"""
Movie catalog access.
"""

from movie_api.kernel.catalog.catalog_service import CatalogService

__all__ = ["CatalogService"]
