"""Tests for version/library.py."""

import tomllib
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

import nanorpc
from nanorpc import SemanticVersion, VersionPayload
from nanorpc.version import library


def test_components_are_fixed() -> None:
    """Test the fixed version numbers."""
    assert library.major() == 1
    assert library.minor() == 1
    assert library.patch() == 1


def test_as_string() -> None:
    """Test the canonical string form."""
    assert library.as_string() == "1.1.1"


def test_string_matches_components() -> None:
    """Test the string is built from the numeric accessors."""
    expected = f"{library.major()}.{library.minor()}.{library.patch()}"
    assert library.as_string() == expected


def test_as_tuple() -> None:
    """Test the tuple form."""
    assert library.as_tuple() == (1, 1, 1)


def test_library_version_constant() -> None:
    """Test the single definition the accessors read from."""
    assert library.LIBRARY_VERSION == SemanticVersion(1, 1, 1)
    assert str(library.LIBRARY_VERSION) == library.as_string()


@pytest.mark.parametrize(
    "order",
    [
        ("major", "minor", "patch", "as_string"),
        ("as_string", "patch", "minor", "major"),
        ("patch", "as_string", "major", "minor"),
    ],
)
def test_repeated_calls_are_idempotent(order: tuple[str, ...]) -> None:
    """Test repeated calls in any order return identical results."""
    first = {name: getattr(library, name)() for name in order}
    for _ in range(5):
        again = {name: getattr(library, name)() for name in order}
        assert again == first


def test_parallel_reads_agree() -> None:
    """Test many simultaneous callers observe identical values."""
    accessors: list[Callable[[], object]] = [
        library.major,
        library.minor,
        library.patch,
        library.as_string,
    ]

    def read_all(_: int) -> tuple[object, ...]:
        return tuple(accessor() for accessor in accessors)

    with ThreadPoolExecutor(max_workers=16) as executor:
        results = list(executor.map(read_all, range(500)))

    assert set(results) == {(1, 1, 1, "1.1.1")}


def test_as_payload() -> None:
    """Test the payload form agrees with the accessors."""
    payload = library.as_payload()

    assert isinstance(payload, VersionPayload)
    assert payload.major == library.major()
    assert payload.minor == library.minor()
    assert payload.patch == library.patch()
    assert payload.version == library.as_string()


def test_as_payload_is_cached() -> None:
    """Test the same payload object is returned on every call."""
    assert library.as_payload() is library.as_payload()


def test_package_reexports() -> None:
    """Test the package root exposes the accessors."""
    assert nanorpc.__version__ == "1.1.1"
    assert nanorpc.major is library.major
    assert nanorpc.as_string() == library.as_string()


def test_project_metadata_version_matches() -> None:
    """Test pyproject.toml declares the same version as the library."""
    pyproject = Path(__file__).parents[2] / "pyproject.toml"
    with pyproject.open("rb") as f:
        metadata = tomllib.load(f)

    assert metadata["project"]["version"] == library.as_string()
