"""Build helper domain types."""

from __future__ import annotations

from pydantic import BaseModel, RootModel


class SourceVersion(BaseModel):
    git: str
    branch: str


class BuildVersions(RootModel[dict[str, SourceVersion]]):
    """Repository directory name -> pinned source."""

    def __getitem__(self, name: str) -> SourceVersion:
        try:
            return self.root[name]
        except KeyError:
            raise KeyError(f"Unknown source repository: {name}") from None

    def names(self) -> list[str]:
        return list(self.root)
