from __future__ import annotations

from typing import Optional, Protocol

from .model import ProjectSettings


class SettingsRepository(Protocol):
    def get(self, project_id: str) -> Optional[ProjectSettings]:
        raise NotImplementedError

    def save(self, project_id: str, settings: ProjectSettings) -> None:
        """Replace the whole settings record of a project."""
        raise NotImplementedError

    def delete(self, project_id: str) -> None:
        """Drop the stored settings; reads fall back to the defaults afterwards."""
        raise NotImplementedError
