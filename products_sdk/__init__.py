from .client import CatalogAPIError, CatalogClient

__all__ = ["CatalogAPIError", "CatalogClient"]
