# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from helm_chart_packager.chart_generator.helm_types import HelmType


@dataclass
class Config:
    chart_file_name: str
    templates_dir_name: str
    support_file_names: list[str]
    manifest_extensions: tuple[str, ...]
    archive_type: str


default_config = Config(
    chart_file_name="Chart.yaml",
    templates_dir_name="templates",
    support_file_names=[
        "README",
        "LICENSE",
    ],
    manifest_extensions=(".yaml", ".yml"),
    archive_type="tar.gz",
)


@dataclass
class HelmConfig:
    """Chart settings read from the optional JSON configuration file."""

    chart: str | None = None
    types: list["HelmType"] = field(default_factory=list)
    keywords: list[str] | None = None
    engine: str | None = None
