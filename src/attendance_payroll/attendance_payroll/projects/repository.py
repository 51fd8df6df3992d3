from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Project


class ProjectRepository(Protocol):
    def list_all(self) -> Sequence[Project]:
        """Projects in creation order."""
        raise NotImplementedError

    def get(self, project_id: str) -> Optional[Project]:
        raise NotImplementedError

    def add(self, project: Project) -> None:
        raise NotImplementedError

    def rename(self, project_id: str, name: str) -> bool:
        raise NotImplementedError

    def delete(self, project_id: str) -> bool:
        raise NotImplementedError
