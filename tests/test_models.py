"""Tests for the models package."""

import pytest

from choco_diff.models import (
    ComparisonEntry,
    InstalledVersion,
    Package,
    Version,
    VersionComponent,
)


def _version(*numbers: int) -> Version:
    return Version.from_iterable(VersionComponent(number=n) for n in numbers)


def test_version_requires_components() -> None:
    with pytest.raises(ValueError, match="at least one component"):
        Version(components=())


def test_component_omits_absent_pre() -> None:
    assert VersionComponent(number=3).to_dict() == {"number": 3}
    assert VersionComponent(number=3, pre=7).to_dict() == {"number": 3, "pre": 7}


def test_package_requires_name() -> None:
    with pytest.raises(ValueError, match="name must be non-empty"):
        Package(name="", version=_version(1), version_str="1")


def test_package_is_immutable() -> None:
    package = Package(name="git", version=_version(2, 23, 0), version_str="2.23.0")

    with pytest.raises(AttributeError):
        package.name = "other"  # type: ignore[misc]


def test_entry_requires_a_side() -> None:
    with pytest.raises(ValueError, match="neither side"):
        ComparisonEntry(name="git")


@pytest.mark.parametrize(
    ("left", "right", "status"),
    [
        ("1.0", None, "left-only"),
        (None, "1.0", "right-only"),
        ("1.0", "1.0", "same"),
        ("1.0", "1.00", "different"),
    ],
)
def test_entry_status(left: str | None, right: str | None, status: str) -> None:
    def side(version_str: str | None) -> InstalledVersion | None:
        if version_str is None:
            return None
        return InstalledVersion(version=_version(1, 0), version_str=version_str)

    entry = ComparisonEntry(name="pkg", left=side(left), right=side(right))

    assert entry.status == status


def test_entry_to_dict_omits_absent_side() -> None:
    installed = InstalledVersion(version=_version(2, 0), version_str="2.0")

    assert ComparisonEntry(name="B", right=installed).to_dict() == {
        "name": "B",
        "right": {"version": [{"number": 2}, {"number": 0}], "versionStr": "2.0"},
    }
