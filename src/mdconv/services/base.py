"""BaseService: foundation for mdconv services.

Every service receives the resolved :class:`MdconvSettings` at
construction time and reads paths and rendering options from it.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mdconv.config.settings import MdconvSettings


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class ConvertService(BaseService):
            def convert(self, input_path: str, ...) -> ServiceResult:
                ...
    """

    def __init__(self, settings: MdconvSettings) -> None:
        self._settings = settings

    def _base_dir(self, configured: str) -> Path | None:
        """Resolve a configured directory against the project root.

        An empty value means "no base directory".
        """
        if not configured:
            return None
        path = Path(configured)
        if path.is_absolute():
            return path
        return self._settings.project_root / path
