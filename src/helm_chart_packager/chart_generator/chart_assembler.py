# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import logging

import yaml

from helm_chart_packager.adaptors.os import (
    copy_file,
    copy_tree,
    create_dirs,
    is_file,
    list_dir,
    path_join,
    write_file,
)
from helm_chart_packager.chart_generator.chart_metadata import ChartMetadata
from helm_chart_packager.chart_generator.errors import ChartGenerationError
from helm_chart_packager.chart_generator.writers.abstract_chart_writer import (
    ChartWriter,
)
from helm_chart_packager.config.cli_configs import Config, default_config

# Get application-specific logger
logger = logging.getLogger("helm_chart_packager")


class ChartAssembler:
    """Lays out a chart directory: templates, Chart.yaml and support files."""

    def __init__(self, chart_writer: ChartWriter, config: Config = default_config):
        self.chart_writer = chart_writer
        self.config = config

    def assemble(
        self,
        metadata: ChartMetadata,
        source_dir: str,
        output_dir: str,
        base_dir: str,
    ) -> None:
        # Copy over all resource descriptors into the helm templates dir
        self.copy_resource_files_to_templates_dir(output_dir, source_dir)

        self.create_chart_yaml(metadata, output_dir)

        # Copy over support files
        for support_file_name in self.config.support_file_names:
            self.copy_text_file(base_dir, output_dir, support_file_name)

    def copy_resource_files_to_templates_dir(
        self, output_dir: str, source_dir: str
    ) -> None:
        templates_dir = path_join(output_dir, self.config.templates_dir_name)
        try:
            create_dirs(templates_dir)
            copy_tree(source_dir, templates_dir)
        except OSError as e:
            raise ChartGenerationError(
                f"Failed to copy manifest files from {source_dir} to chart templates directory: {templates_dir}: {e}"
            ) from e

    def create_chart_yaml(self, metadata: ChartMetadata, output_dir: str) -> None:
        output_chart_file = path_join(output_dir, self.config.chart_file_name)
        try:
            create_dirs(output_dir)
            write_file(output_chart_file, self.chart_writer.write(metadata))
        except (OSError, yaml.YAMLError) as e:
            raise ChartGenerationError(
                f"Failed to save chart {output_chart_file}: {e}"
            ) from e

    def copy_text_file(self, base_dir: str, output_dir: str, base_name: str) -> None:
        try:
            candidates = find_support_files(base_dir, base_name)
            if not candidates:
                return
            source_file = candidates[0]
            if len(candidates) > 1:
                logger.warning(
                    f"Found {len(candidates)} of {base_name} files. Using first one {source_file}"
                )
            copy_file(
                path_join(base_dir, source_file), path_join(output_dir, source_file)
            )
        except OSError as e:
            raise ChartGenerationError(f"Failed to save {base_name}: {e}") from e


def find_support_files(base_dir: str, base_name: str) -> list[str]:
    """
    List the files of base_dir named like base_name, case-insensitively.

    README, readme.md and README.adoc all match "README". Matches are sorted
    so the first one does not depend on the filesystem listing order.
    """
    lower = base_name.lower()
    return sorted(
        name
        for name in list_dir(base_dir)
        if (name.lower() == lower or name.lower().startswith(lower + "."))
        and is_file(path_join(base_dir, name))
    )
