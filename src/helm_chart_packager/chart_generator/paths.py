# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import logging
from dataclasses import dataclass

from helm_chart_packager.adaptors.os import (
    is_directory,
    is_file,
    list_dir,
    path_join,
    remove_directory,
)
from helm_chart_packager.chart_generator.errors import ChartGenerationError
from helm_chart_packager.chart_generator.helm_types import HelmType
from helm_chart_packager.config.cli_configs import default_config

# Get application-specific logger
logger = logging.getLogger("helm_chart_packager")


@dataclass(frozen=True)
class BuildLayout:
    """Directories of the project being packaged.

    base_dir: project root, README and LICENSE files are looked up here.
    build_directory: build target root, charts and archives are written below it.
    build_output_directory: build output root holding META-INF/fabric8.
    """

    base_dir: str
    build_directory: str
    build_output_directory: str

    @staticmethod
    def from_base_dir(
        base_dir: str,
        build_directory: str | None = None,
        build_output_directory: str | None = None,
    ) -> "BuildLayout":
        build_directory = build_directory or path_join(base_dir, "target")
        build_output_directory = build_output_directory or path_join(
            build_directory, "classes"
        )
        return BuildLayout(
            base_dir=base_dir,
            build_directory=build_directory,
            build_output_directory=build_output_directory,
        )


def resolve_output_dir(
    helm_type: HelmType, layout: BuildLayout, override: str | None = None
) -> str:
    """Return an empty-to-be chart directory, deleting any previous one."""
    output_dir = override or path_join(
        layout.build_directory, "fabric8", "helm", helm_type.classifier
    )
    if is_directory(output_dir):
        logger.debug(f"Removing previous chart directory {output_dir}")
        try:
            remove_directory(output_dir)
        except OSError as e:
            raise ChartGenerationError(
                f"Failed to remove previous chart directory {output_dir}: {e}"
            ) from e
    return output_dir


def resolve_source_dir(
    helm_type: HelmType,
    layout: BuildLayout,
    chart_name: str,
    override: str | None = None,
) -> str | None:
    source_dir = override or path_join(
        layout.build_output_directory, "META-INF", "fabric8", helm_type.source_dir
    )
    if not is_directory(source_dir):
        logger.warning(
            f"Chart source directory {source_dir} does not exist so cannot make chart {chart_name}. "
            "Probably you need to run the resource manifest generation step before."
        )
        return None
    if not contains_yaml_files(source_dir):
        logger.warning(
            f"Chart source directory {source_dir} does not contain any YAML manifest to make chart {chart_name}. "
            "Probably you need to run the resource manifest generation step before."
        )
        return None
    return source_dir


def contains_yaml_files(directory: str) -> bool:
    for name in list_dir(directory):
        if name.lower().endswith(default_config.manifest_extensions) and is_file(
            path_join(directory, name)
        ):
            return True
    return False
