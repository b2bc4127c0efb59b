"""Typed view of the Initializr metadata document.

The endpoint returns untyped JSON. ``parse_metadata`` converts it into the
records below and raises ``MalformedMetadata`` on any shape deviation;
``load_metadata`` wraps it and fails closed by returning None.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple

from constants import MetadataCategories
from errors import MalformedMetadata

SINGLE_SELECT_CATEGORIES = (
    MetadataCategories.TYPE.value,
    MetadataCategories.LANGUAGE.value,
    MetadataCategories.BOOT_VERSION.value,
    MetadataCategories.JAVA_VERSION.value,
    MetadataCategories.PACKAGING.value,
)


@dataclass(frozen=True)
class MetadataOption:
    """One selectable value of a category."""
    id: str
    name: str
    description: Optional[str] = None


@dataclass(frozen=True)
class MetadataCategory:
    """A category with its declared default and ordered values."""
    default: Optional[str]
    values: Tuple[MetadataOption, ...] = ()

    def ids(self) -> List[str]:
        return [v.id for v in self.values]

    def find(self, option_id: str) -> Optional[MetadataOption]:
        for v in self.values:
            if v.id == option_id:
                return v
        return None


@dataclass(frozen=True)
class DependencyGroup:
    """A named group of dependencies, e.g. "Web" or "SQL"."""
    name: str
    values: Tuple[MetadataOption, ...] = ()


@dataclass(frozen=True)
class MetadataDocument:
    """Validated metadata; categories absent from the payload are None."""
    categories: Dict[str, MetadataCategory] = field(default_factory=dict)
    dependency_groups: Tuple[DependencyGroup, ...] = ()
    has_dependencies: bool = False
    fields: Tuple[str, ...] = ()

    def category(self, name: str) -> Optional[MetadataCategory]:
        return self.categories.get(name)

    @property
    def boot_version(self) -> Optional[MetadataCategory]:
        return self.category(MetadataCategories.BOOT_VERSION.value)

    @property
    def java_version(self) -> Optional[MetadataCategory]:
        return self.category(MetadataCategories.JAVA_VERSION.value)

    def default_of(self, name: str) -> Optional[str]:
        cat = self.category(name)
        return cat.default if cat else None

    def iter_dependencies(self) -> Iterator[Tuple[DependencyGroup, MetadataOption]]:
        """Yield (group, dependency) pairs in document order."""
        for group in self.dependency_groups:
            for dep in group.values:
                yield group, dep


def _expect(cond: bool, message: str) -> None:
    if not cond:
        raise MalformedMetadata(message)


def _optional_str(value: Any, where: str) -> Optional[str]:
    if value is None:
        return None
    _expect(isinstance(value, str), f"{where} must be a string")
    return value or None


def _parse_option(raw: Any, where: str) -> MetadataOption:
    _expect(isinstance(raw, dict), f"{where} must be an object")
    option_id = raw.get("id")
    _expect(isinstance(option_id, str) and option_id != "", f"{where}.id must be a non-empty string")
    name = raw.get("name")
    if name is None:
        name = option_id
    _expect(isinstance(name, str), f"{where}.name must be a string")
    description = _optional_str(raw.get("description"), f"{where}.description")
    return MetadataOption(id=option_id, name=name, description=description)


def _parse_values(raw: Any, where: str) -> Any:
    values = raw.get("values", [])
    if values is None:
        values = []
    _expect(isinstance(values, list), f"{where}.values must be a list")
    return values


def _parse_category(name: str, raw: Any) -> MetadataCategory:
    _expect(isinstance(raw, dict), f"{name} must be an object")
    default = _optional_str(raw.get("default"), f"{name}.default")
    values = _parse_values(raw, name)
    options = tuple(_parse_option(v, f"{name}.values[{i}]") for i, v in enumerate(values))
    return MetadataCategory(default=default, values=options)


def _parse_dependencies(raw: Any) -> Tuple[DependencyGroup, ...]:
    name = MetadataCategories.DEPENDENCIES.value
    _expect(isinstance(raw, dict), f"{name} must be an object")
    groups = []
    for i, group in enumerate(_parse_values(raw, name)):
        where = f"{name}.values[{i}]"
        _expect(isinstance(group, dict), f"{where} must be an object")
        group_name = group.get("name")
        _expect(isinstance(group_name, str), f"{where}.name must be a string")
        deps = tuple(
            _parse_option(d, f"{where}.values[{j}]")
            for j, d in enumerate(_parse_values(group, where))
        )
        groups.append(DependencyGroup(name=group_name, values=deps))
    return tuple(groups)


def parse_metadata(raw: Any) -> MetadataDocument:
    """Validate a metadata payload and convert it into a MetadataDocument.

    Args:
        raw: JSON text, bytes, or an already decoded mapping.

    Raises:
        MalformedMetadata: The payload is empty, not JSON, or any known
            category deviates from the expected shape.
    """
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedMetadata(f"metadata is not valid UTF-8: {exc}") from exc
    if isinstance(raw, str):
        _expect(raw.strip() != "", "metadata is empty")
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise MalformedMetadata(f"metadata is not valid JSON: {exc}") from exc
    _expect(isinstance(raw, dict), "metadata must be a JSON object")

    categories: Dict[str, MetadataCategory] = {}
    for name in SINGLE_SELECT_CATEGORIES:
        if name in raw:
            categories[name] = _parse_category(name, raw[name])

    deps_key = MetadataCategories.DEPENDENCIES.value
    groups: Tuple[DependencyGroup, ...] = ()
    if deps_key in raw:
        groups = _parse_dependencies(raw[deps_key])

    return MetadataDocument(
        categories=categories,
        dependency_groups=groups,
        has_dependencies=deps_key in raw,
        fields=tuple(raw.keys()),
    )


def load_metadata(raw: Any) -> Optional[MetadataDocument]:
    """Return a MetadataDocument, or None when raw is absent or malformed."""
    if raw is None:
        return None
    if isinstance(raw, MetadataDocument):
        return raw
    try:
        return parse_metadata(raw)
    except MalformedMetadata:
        return None
