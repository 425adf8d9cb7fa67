# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import json
import tarfile
from pathlib import Path

import pytest
import yaml
from typer.testing import CliRunner

from helm_chart_packager.cli.main_cli import app

runner = CliRunner()


def snapshot(directory: Path) -> dict[str, bytes]:
    return {
        str(path.relative_to(directory)): path.read_bytes()
        for path in sorted(directory.rglob("*"))
        if path.is_file()
    }


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    (tmp_path / "project.json").write_text(
        json.dumps(
            {
                "artifact_id": "demo",
                "version": "1.2.3",
                "description": "Demo service",
                "url": "https://example.com/demo",
                "scm": {"url": "https://github.com/example/demo"},
                "developers": [
                    {"name": "Jane Doe", "email": "jane@example.com"},
                    {"name": "", "email": ""},
                ],
            }
        )
    )
    (tmp_path / "README.md").write_text("# Demo\n")
    (tmp_path / "LICENSE").write_text("Apache License 2.0\n")
    kubernetes = tmp_path / "target" / "classes" / "META-INF" / "fabric8" / "kubernetes"
    (kubernetes / "extra").mkdir(parents=True)
    (kubernetes / "deployment.yml").write_text("kind: Deployment\n")
    (kubernetes / "service.yaml").write_text("kind: Service\n")
    (kubernetes / "extra" / "configmap.yaml").write_text("kind: ConfigMap\n")
    return tmp_path


def run_helm(project_dir: Path, *args: str):  # type: ignore[no-untyped-def]
    return runner.invoke(
        app,
        [
            "helm",
            f"--project-file={project_dir / 'project.json'}",
            f"--base-dir={project_dir}",
            *args,
        ],
        color=False,
    )


def test_chart_layout_and_archive_round_trip(project_dir: Path) -> None:
    result = run_helm(project_dir)

    assert result.exit_code == 0, result.output
    chart_dir = project_dir / "target" / "fabric8" / "helm" / "kubernetes"
    assert snapshot(chart_dir).keys() == {
        "Chart.yaml",
        "LICENSE",
        "README.md",
        "templates/deployment.yml",
        "templates/service.yaml",
        "templates/extra/configmap.yaml",
    }
    assert yaml.safe_load((chart_dir / "Chart.yaml").read_text()) == {
        "name": "demo",
        "home": "https://example.com/demo",
        "sources": ["https://github.com/example/demo"],
        "version": "1.2.3",
        "description": "Demo service",
        "maintainers": [{"name": "Jane Doe", "email": "jane@example.com"}],
    }

    archive = project_dir / "target" / "demo-1.2.3-kubernetes.tar.gz"
    with tarfile.open(archive, "r:gz") as tar:
        archived = {
            member.name: tar.extractfile(member).read()  # type: ignore[union-attr]
            for member in tar.getmembers()
            if member.isfile()
        }
    assert archived == snapshot(chart_dir)


def test_skipped_helm_type_does_not_abort_the_others(project_dir: Path) -> None:
    result = run_helm(project_dir, "--type=openshift,kubernetes")

    assert result.exit_code == 0, result.output
    target = project_dir / "target"
    assert sorted(p.name for p in target.glob("*.tar.gz")) == [
        "demo-1.2.3-kubernetes.tar.gz"
    ]
    assert sorted(p.name for p in (target / "fabric8" / "helm").iterdir()) == [
        "kubernetes"
    ]
    assert "does not exist so cannot make chart demo" in result.output


def test_rerun_replaces_the_previous_chart(project_dir: Path) -> None:
    first = run_helm(project_dir)
    assert first.exit_code == 0, first.output
    chart_dir = project_dir / "target" / "fabric8" / "helm" / "kubernetes"
    fresh = snapshot(chart_dir)
    (chart_dir / "stale.txt").write_text("left over\n")
    (chart_dir / "templates" / "old.yaml").write_text("kind: Old\n")

    second = run_helm(project_dir)

    assert second.exit_code == 0, second.output
    assert snapshot(chart_dir) == fresh


def test_source_and_output_directory_overrides(
    project_dir: Path, tmp_path_factory: pytest.TempPathFactory
) -> None:
    manifests = tmp_path_factory.mktemp("manifests")
    (manifests / "route.yaml").write_text("kind: Route\n")
    output_dir = tmp_path_factory.mktemp("chart-out") / "openshift-chart"

    result = run_helm(
        project_dir,
        "--type=openshift",
        f"--source-dir={manifests}",
        f"--output-dir={output_dir}",
    )

    assert result.exit_code == 0, result.output
    assert (output_dir / "templates" / "route.yaml").read_text() == "kind: Route\n"
    assert (project_dir / "target" / "demo-1.2.3-openshift.tar.gz").is_file()
