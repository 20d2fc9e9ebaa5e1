"""BaseService — shared construction for mokareads services.

Every service reads from a :class:`Library`. Settings are optional so
that services can run against an in-memory library in tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mokareads.config.settings import MokaSettings
    from mokareads.infrastructure.library import Catalog, Library


class BaseService:
    """Base for service classes.

    Usage::

        class CatalogService(BaseService):
            def search(self, query: str) -> ServiceResult:
                catalog = self._catalog
                ...
    """

    def __init__(self, library: Library, settings: MokaSettings | None = None) -> None:
        self._library = library
        if settings is None:
            from mokareads.config.settings import MokaSettings

            settings = MokaSettings()
        self._settings = settings

    @property
    def _catalog(self) -> Catalog:
        """The catalog published at the time of access."""
        return self._library.current
