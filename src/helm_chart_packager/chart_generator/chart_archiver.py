# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import logging
import tarfile

from helm_chart_packager.adaptors.os import (
    create_dirs,
    list_dir,
    parent_directory,
    path_join,
)
from helm_chart_packager.chart_generator.errors import ChartGenerationError

# Get application-specific logger
logger = logging.getLogger("helm_chart_packager")


def archive_file_name(chart_name: str, version: str | None, classifier: str) -> str:
    parts = [chart_name]
    if version:
        parts.append(version)
    parts.append(classifier)
    return "-".join(parts) + ".tar.gz"


def create_archive(source_dir: str, destination_file: str) -> None:
    """Tar and gzip the contents of source_dir into destination_file.

    Entries are stored relative to source_dir, so extracting the archive
    gives back Chart.yaml, templates/ and friends without a wrapping folder.
    """
    try:
        destination_dir = parent_directory(destination_file)
        if destination_dir:
            create_dirs(destination_dir)
        with tarfile.open(destination_file, "w:gz") as tar:
            for name in sorted(list_dir(source_dir)):
                tar.add(path_join(source_dir, name), arcname=name)
    except (OSError, tarfile.TarError) as e:
        raise ChartGenerationError(
            f"Failed to create archive {destination_file} from {source_dir}: {e}"
        ) from e
    logger.info(f"Created chart archive {destination_file}")
