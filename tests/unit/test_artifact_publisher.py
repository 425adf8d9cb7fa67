# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import json
from pathlib import Path

import pytest

from helm_chart_packager.artifact_management.artifact_publisher import (
    ArtifactPublisher,
    AttachedArtifact,
)
from helm_chart_packager.chart_generator.errors import ChartGenerationError


def test_attach_artifact_records_type_and_classifier(tmp_path: Path) -> None:
    archive = tmp_path / "demo-1.0-kubernetes.tar.gz"
    archive.write_bytes(b"archive")
    publisher = ArtifactPublisher()

    artifact = publisher.attach_artifact(str(archive), "tar.gz", "kubernetes")

    assert artifact == AttachedArtifact(
        file_path=str(archive), artifact_type="tar.gz", classifier="kubernetes"
    )
    assert publisher.artifacts == [artifact]


def test_attach_artifact_rejects_missing_file(tmp_path: Path) -> None:
    publisher = ArtifactPublisher()

    with pytest.raises(ChartGenerationError, match="does not exist"):
        publisher.attach_artifact(str(tmp_path / "missing.tar.gz"), "tar.gz", "x")
    assert publisher.artifacts == []


def test_to_json_lists_artifacts_in_attach_order(tmp_path: Path) -> None:
    first = tmp_path / "demo-1.0-kubernetes.tar.gz"
    second = tmp_path / "demo-1.0-openshift.tar.gz"
    first.write_bytes(b"1")
    second.write_bytes(b"2")
    publisher = ArtifactPublisher()
    publisher.attach_artifact(str(first), "tar.gz", "kubernetes")
    publisher.attach_artifact(str(second), "tar.gz", "openshift")

    assert json.loads(publisher.to_json()) == [
        {"file": str(first), "type": "tar.gz", "classifier": "kubernetes"},
        {"file": str(second), "type": "tar.gz", "classifier": "openshift"},
    ]


def test_to_json_without_artifacts() -> None:
    assert json.loads(ArtifactPublisher().to_json()) == []
