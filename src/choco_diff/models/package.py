"""Package and comparison entry models."""

from __future__ import annotations

from dataclasses import dataclass

from .version import Version

STATUS_LEFT_ONLY = "left-only"
STATUS_RIGHT_ONLY = "right-only"
STATUS_SAME = "same"
STATUS_DIFFERENT = "different"


@dataclass(slots=True, frozen=True)
class InstalledVersion:
    """Version of a package as installed on one side of a comparison."""

    version: Version
    version_str: str

    def to_dict(self) -> dict[str, object]:
        return {
            "version": self.version.to_list(),
            "versionStr": self.version_str,
        }


@dataclass(slots=True, frozen=True)
class Package:
    """A single parsed line of a package listing."""

    name: str
    version: Version
    version_str: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Package name must be non-empty")

    @property
    def installed(self) -> InstalledVersion:
        return InstalledVersion(version=self.version, version_str=self.version_str)

    def to_dict(self) -> dict[str, object]:
        return {"name": self.name, **self.installed.to_dict()}


@dataclass(slots=True, frozen=True)
class ComparisonEntry:
    """Presence and version of one package name across two listings."""

    name: str
    left: InstalledVersion | None = None
    right: InstalledVersion | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Comparison entry name must be non-empty")
        if self.left is None and self.right is None:
            raise ValueError(f"Comparison entry '{self.name}' has neither side")

    @property
    def status(self) -> str:
        """Classify the entry by presence and textual version equality."""
        if self.right is None:
            return STATUS_LEFT_ONLY
        if self.left is None:
            return STATUS_RIGHT_ONLY
        if self.left.version_str == self.right.version_str:
            return STATUS_SAME
        return STATUS_DIFFERENT

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {"name": self.name}
        if self.left is not None:
            data["left"] = self.left.to_dict()
        if self.right is not None:
            data["right"] = self.right.to_dict()
        return data
