# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Helm chart generator runs the assembly, archiving and publishing steps
for every requested helm type."""

import logging

from helm_chart_packager.adaptors.os import path_join
from helm_chart_packager.artifact_management.artifact_publisher import (
    ArtifactPublisher,
    AttachedArtifact,
)
from helm_chart_packager.chart_generator.chart_archiver import (
    archive_file_name,
    create_archive,
)
from helm_chart_packager.chart_generator.chart_assembler import ChartAssembler
from helm_chart_packager.chart_generator.chart_metadata import ChartMetadata
from helm_chart_packager.chart_generator.helm_types import HelmType
from helm_chart_packager.chart_generator.paths import (
    BuildLayout,
    resolve_output_dir,
    resolve_source_dir,
)

# Get application-specific logger
logger = logging.getLogger("helm_chart_packager")


class HelmChartGenerator:
    def __init__(
        self,
        layout: BuildLayout,
        assembler: ChartAssembler,
        publisher: ArtifactPublisher,
        source_dir: str | None = None,
        output_dir: str | None = None,
        archive_type: str = "tar.gz",
    ) -> None:
        self.layout = layout
        self.assembler = assembler
        self.publisher = publisher
        self.source_dir = source_dir
        self.output_dir = output_dir
        self.archive_type = archive_type

    def generate(
        self,
        chart_name: str,
        metadata: ChartMetadata,
        helm_types: list[HelmType],
        version: str | None,
    ) -> list[AttachedArtifact]:
        # a ChartGenerationError stops the remaining helm types, skips do not
        attached = []
        for helm_type in helm_types:
            artifact = self.generate_helm_chart_directory(
                chart_name, metadata, helm_type, version
            )
            if artifact is not None:
                attached.append(artifact)
        return attached

    def generate_helm_chart_directory(
        self,
        chart_name: str,
        metadata: ChartMetadata,
        helm_type: HelmType,
        version: str | None,
    ) -> AttachedArtifact | None:
        output_dir = resolve_output_dir(helm_type, self.layout, self.output_dir)
        source_dir = resolve_source_dir(
            helm_type, self.layout, chart_name, self.source_dir
        )
        if source_dir is None:
            return None
        logger.info(f'Creating Helm Chart "{chart_name}" for {helm_type.description}')
        logger.debug(f"SourceDir: {source_dir}")
        logger.debug(f"OutputDir: {output_dir}")

        self.assembler.assemble(metadata, source_dir, output_dir, self.layout.base_dir)

        # now lets create the tarball
        destination_file = path_join(
            self.layout.build_directory,
            archive_file_name(chart_name, version, helm_type.classifier),
        )
        create_archive(output_dir, destination_file)
        return self.publisher.attach_artifact(
            destination_file, self.archive_type, helm_type.classifier
        )
