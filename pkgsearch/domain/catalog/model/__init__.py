from pkgsearch.domain.catalog.model.entry import (
    Catalog,
    CatalogEntry,
    Library,
    Package,
    Release,
)

__all__ = ["Catalog", "CatalogEntry", "Library", "Package", "Release"]
