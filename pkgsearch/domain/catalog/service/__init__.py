from pkgsearch.domain.catalog.service.catalog import CatalogService, CatalogStats

__all__ = ["CatalogService", "CatalogStats"]
