# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import io
import json
import logging
import threading
from dataclasses import dataclass

from helm_chart_packager.adaptors.os import is_file
from helm_chart_packager.chart_generator.errors import ChartGenerationError

# Get application-specific logger
logger = logging.getLogger("helm_chart_packager")


@dataclass(frozen=True)
class AttachedArtifact:
    file_path: str
    artifact_type: str
    classifier: str


class ArtifactPublisher:
    """Collects the files produced by a run as build outputs."""

    def __init__(self) -> None:
        self._artifacts: list[AttachedArtifact] = []
        self._lock = threading.Lock()

    @property
    def artifacts(self) -> list[AttachedArtifact]:
        with self._lock:
            return list(self._artifacts)

    def attach_artifact(
        self, file_path: str, artifact_type: str, classifier: str
    ) -> AttachedArtifact:
        if not is_file(file_path):
            raise ChartGenerationError(
                f"Cannot attach artifact {file_path}: file does not exist"
            )
        artifact = AttachedArtifact(
            file_path=file_path, artifact_type=artifact_type, classifier=classifier
        )
        with self._lock:
            self._artifacts.append(artifact)
        logger.debug(
            f"Attached artifact {file_path} (type: {artifact_type}, classifier: {classifier})"
        )
        return artifact

    def to_json(self) -> str:
        output = io.StringIO()
        json_artifacts = [
            {
                "file": artifact.file_path,
                "type": artifact.artifact_type,
                "classifier": artifact.classifier,
            }
            for artifact in self.artifacts
        ]

        json.dump(json_artifacts, output, indent=2)
        json_string = output.getvalue()
        output.close()

        return json_string
