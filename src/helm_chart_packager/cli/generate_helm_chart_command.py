# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

# Command for generating helm charts out of previously generated manifests

import json
import logging
from typing import Annotated, Optional

import typer

from helm_chart_packager.adaptors.os import write_file
from helm_chart_packager.artifact_management.artifact_publisher import (
    ArtifactPublisher,
)
from helm_chart_packager.chart_generator.chart_assembler import ChartAssembler
from helm_chart_packager.chart_generator.chart_metadata import (
    build_chart_metadata,
    resolve_chart_name,
)
from helm_chart_packager.chart_generator.errors import ChartGenerationError
from helm_chart_packager.chart_generator.helm_chart_generator import (
    HelmChartGenerator,
)
from helm_chart_packager.chart_generator.helm_types import (
    UnknownVariantError,
    select_helm_types,
)
from helm_chart_packager.chart_generator.paths import BuildLayout
from helm_chart_packager.chart_generator.writers.yaml_chart_writer import (
    YAMLChartWriter,
)
from helm_chart_packager.config import HelmConfig, JsonConfigParser, default_config
from helm_chart_packager.utils.custom_splitting import CustomSplit
from helm_chart_packager.utils.logging import parse_log_level, setup_logging

# Get application-specific logger
logger = logging.getLogger("helm_chart_packager")


def helm(
    project_file: Annotated[
        str,
        typer.Option(
            "--project-file",
            "-p",
            help=(
                "Path to the JSON project descriptor holding artifact_id, version, "
                "description, url, scm and developers."
            ),
        ),
    ] = "project.json",
    config_file: Annotated[
        Optional[str],
        typer.Option(
            "--config",
            "-c",
            help="Path to a JSON file with helm settings (chart, type, keywords, engine).",
        ),
    ] = None,
    chart: Annotated[
        Optional[str],
        typer.Option(
            "--chart",
            envvar="FABRIC8_HELM_CHART",
            help="Chart name. Defaults to the project artifact_id.",
        ),
    ] = None,
    helm_type: Annotated[
        Optional[str],
        typer.Option(
            "--type",
            envvar="FABRIC8_HELM_TYPE",
            help="Comma separated helm types to generate: kubernetes, openshift.",
        ),
    ] = None,
    source_dir: Annotated[
        Optional[str],
        typer.Option(
            "--source-dir",
            envvar="FABRIC8_HELM_SOURCEDIR",
            help=(
                "Directory holding the resource manifests. Defaults to "
                "<build-output-dir>/META-INF/fabric8/<type>."
            ),
        ),
    ] = None,
    output_dir: Annotated[
        Optional[str],
        typer.Option(
            "--output-dir",
            envvar="FABRIC8_HELM_OUTPUTDIR",
            help="Chart directory. Defaults to <build-dir>/fabric8/helm/<type>.",
        ),
    ] = None,
    base_dir: Annotated[
        str,
        typer.Option(
            "--base-dir",
            help="Project root, README and LICENSE files are taken from here.",
        ),
    ] = ".",
    build_dir: Annotated[
        Optional[str],
        typer.Option(
            "--build-dir",
            help="Build target directory, archives are written here. Defaults to <base-dir>/target.",
        ),
    ] = None,
    build_output_dir: Annotated[
        Optional[str],
        typer.Option(
            "--build-output-dir",
            help="Build output directory. Defaults to <build-dir>/classes.",
        ),
    ] = None,
    keywords: Annotated[
        Optional[str],
        typer.Option(
            "--keywords",
            help="Comma separated chart keywords, use quotes to preserve commas.",
        ),
    ] = None,
    engine: Annotated[
        Optional[str],
        typer.Option("--engine", help="Template engine of the chart."),
    ] = None,
    attached_artifacts: Annotated[
        Optional[str],
        typer.Option(
            "--attached-artifacts",
            help="Write the generated archives as a JSON list to this file.",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL.",
        ),
    ] = "INFO",
) -> None:
    """
    Generate Helm charts for previously generated Kubernetes resources.

    For every helm type the manifests are copied into a chart directory next to
    a Chart.yaml and the project README and LICENSE, then archived as
    <chart>-<version>-<type>.tar.gz in the build directory.
    """
    try:
        setup_logging(parse_log_level(log_level))
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    try:
        project = JsonConfigParser.load_project_facts(project_file)
        helm_config = (
            JsonConfigParser.load_helm_config(config_file)
            if config_file
            else HelmConfig()
        )
    except FileNotFoundError as e:
        typer.echo(f"Error: File '{e.filename}' not found.", err=True)
        raise typer.Exit(code=1)
    except json.JSONDecodeError as e:
        typer.echo(f"Error: Invalid JSON: {e}", err=True)
        raise typer.Exit(code=1)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    try:
        helm_types = select_helm_types(helm_type, helm_config.types)
    except UnknownVariantError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    chart_name = resolve_chart_name(project, chart, helm_config.chart)
    logger.debug(
        f"Generating chart {chart_name} for helm types: {[t.identifier for t in helm_types]}"
    )
    chart_keywords = (
        CustomSplit().custom_split(keywords) if keywords else helm_config.keywords
    )
    metadata = build_chart_metadata(
        chart_name,
        project,
        keywords=chart_keywords,
        engine=engine or helm_config.engine,
    )

    publisher = ArtifactPublisher()
    generator = HelmChartGenerator(
        layout=BuildLayout.from_base_dir(base_dir, build_dir, build_output_dir),
        assembler=ChartAssembler(YAMLChartWriter(), default_config),
        publisher=publisher,
        source_dir=source_dir,
        output_dir=output_dir,
        archive_type=default_config.archive_type,
    )
    try:
        artifacts = generator.generate(
            chart_name, metadata, helm_types, project.version
        )
    except ChartGenerationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if attached_artifacts:
        try:
            write_file(attached_artifacts, publisher.to_json())
        except OSError as e:
            typer.echo(f"Error writing attached artifacts file: {e}", err=True)
            raise typer.Exit(code=1)

    if not artifacts:
        typer.echo(f"No chart generated for {chart_name}.")
        return
    for artifact in artifacts:
        typer.echo(f"{artifact.classifier}: {artifact.file_path}")
