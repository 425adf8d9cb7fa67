# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Chart.yaml metadata model and the builder that derives it from the project."""

from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any


@dataclass(frozen=True)
class Developer:
    name: str | None = None
    email: str | None = None


@dataclass(frozen=True)
class ProjectFacts:
    """Read-only information about the project the chart is generated for."""

    artifact_id: str
    version: str | None = None
    description: str | None = None
    url: str | None = None  # project homepage
    scm_url: str | None = None  # source control browsing url
    developers: tuple[Developer, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.artifact_id or not self.artifact_id.strip():
            raise ValueError("Project artifact_id must not be empty")


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _non_empty(value: Any) -> Any:
    """Recursively drop None, blank strings and empty collections.

    Returns None when nothing is left so the caller can drop the key too.
    """
    if is_dataclass(value) and not isinstance(value, type):
        value = {f.name: getattr(value, f.name) for f in fields(value)}
    if isinstance(value, dict):
        filtered = {}
        for key, item in value.items():
            item = _non_empty(item)
            if item is not None:
                filtered[key] = item
        return filtered or None
    if isinstance(value, (list, tuple)):
        items = [_non_empty(item) for item in value]
        return [item for item in items if item is not None] or None
    if isinstance(value, str) and not value.strip():
        return None
    return value


@dataclass(frozen=True)
class Maintainer:
    name: str | None = None
    email: str | None = None


@dataclass(frozen=True)
class ChartMetadata:
    """
    Represents the Helm Chart.yaml file.

    Field order is the key order of the serialized file. Only non-empty
    values are serialized, see to_dict.
    """

    name: str
    home: str | None = None
    sources: tuple[str, ...] | None = None
    version: str | None = None
    description: str | None = None
    keywords: tuple[str, ...] | None = None
    maintainers: tuple[Maintainer, ...] | None = None
    engine: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _non_empty(self) or {}


def resolve_chart_name(project: ProjectFacts, *candidates: str | None) -> str:
    """Return the first non-blank candidate, else the project artifact id."""
    for candidate in candidates:
        if not _is_blank(candidate):
            return candidate.strip()  # type: ignore[union-attr]
    return project.artifact_id


def build_chart_metadata(
    chart_name: str,
    project: ProjectFacts,
    keywords: list[str] | None = None,
    engine: str | None = None,
) -> ChartMetadata:
    sources = None
    if not _is_blank(project.scm_url):
        sources = (project.scm_url,)

    # developers without any name or email are of no use as maintainers
    maintainers = tuple(
        Maintainer(name=developer.name, email=developer.email)
        for developer in project.developers
        if not _is_blank(developer.name) or not _is_blank(developer.email)
    )

    return ChartMetadata(
        name=chart_name,
        home=project.url,
        sources=sources,  # type: ignore[arg-type]
        version=project.version,
        description=project.description,
        keywords=tuple(keywords) if keywords else None,
        maintainers=maintainers or None,
        engine=engine,
    )
