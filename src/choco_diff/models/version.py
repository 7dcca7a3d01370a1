"""Version models for parsed Chocolatey listings."""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Iterable, Iterator


@dataclass(slots=True, frozen=True)
class VersionComponent:
    """One dot-delimited segment of a version string."""

    number: int
    pre: int | None = None

    def to_dict(self) -> dict[str, int]:
        data = {"number": self.number}
        if self.pre is not None:
            data["pre"] = self.pre
        return data


@dataclass(slots=True, frozen=True)
class Version:
    """Ordered components of a dotted version, left to right.

    Only decomposes the version string; no ordering between versions is
    defined.
    """

    components: tuple[VersionComponent, ...]

    def __post_init__(self) -> None:
        if not self.components:
            raise ValueError("Version must contain at least one component")

    def __iter__(self) -> Iterator[VersionComponent]:
        return iter(self.components)

    def __len__(self) -> int:
        return len(self.components)

    def to_list(self) -> list[dict[str, int]]:
        return [component.to_dict() for component in self.components]

    @classmethod
    def from_iterable(cls, components: Iterable[VersionComponent]) -> Version:
        return cls(components=tuple(components))
