"""
Shared catalog instance for the HTTP layer
"""

from boxoffice.services.catalog_service import CatalogService

catalog = CatalogService()

def get_catalog() -> CatalogService:
    """Dependency returning the process-wide catalog"""
    return catalog
