"""
Error classes for clearer exception sources.
"""
from __future__ import annotations

class BladeArenaError(Exception):
    pass

class DataLoadError(BladeArenaError):
    def __init__(self, path: str, detail: str):
        super().__init__(f"Failed to load {path}: {detail}")
        self.path = path
        self.detail = detail

class CatalogError(BladeArenaError):
    """Unknown part id, or a catalog with nothing to pick from."""
    def __init__(self, catalog: str, detail: str):
        super().__init__(f"{catalog}: {detail}")
        self.catalog = catalog
        self.detail = detail

class ValidationError(BladeArenaError):
    pass
