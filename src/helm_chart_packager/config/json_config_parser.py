# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import json
import logging
from typing import Any

from helm_chart_packager.adaptors.os import open_file
from helm_chart_packager.chart_generator.chart_metadata import Developer, ProjectFacts
from helm_chart_packager.chart_generator.helm_types import HelmType
from helm_chart_packager.config.cli_configs import HelmConfig


def _optional_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"Field '{key}' must be a string, got: {value!r}")
    return value


def _optional_str_list(data: dict[str, Any], key: str) -> list[str] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"Field '{key}' must be a list of strings, got: {value!r}")
    return value


class JsonConfigParser:
    """Parser for JSON configuration files used by helm-chart-packager."""

    @staticmethod
    def parse_project_facts(project_dict: dict[str, Any]) -> ProjectFacts:
        """Build ProjectFacts out of a project descriptor.

        JSON format:
        {
            "artifact_id": "demo",
            "version": "1.2.3",
            "description": "Demo service",
            "url": "https://example.com/demo",
            "scm": {"url": "https://github.com/example/demo"},
            "developers": [{"name": "Jane", "email": "jane@example.com"}]
        }

        Raises:
            ValueError: If artifact_id is missing or a field has the wrong type
        """
        if not isinstance(project_dict, dict):
            raise ValueError("Project descriptor must be a JSON object")
        artifact_id = _optional_str(project_dict, "artifact_id")
        if artifact_id is None:
            raise ValueError("Project descriptor is missing 'artifact_id'")

        scm = project_dict.get("scm") or {}
        if not isinstance(scm, dict):
            raise ValueError(f"Field 'scm' must be an object, got: {scm!r}")

        developers = []
        for developer in project_dict.get("developers") or []:
            if not isinstance(developer, dict):
                raise ValueError(
                    f"Developer entries must be objects, got: {developer!r}"
                )
            developers.append(
                Developer(
                    name=_optional_str(developer, "name"),
                    email=_optional_str(developer, "email"),
                )
            )

        return ProjectFacts(
            artifact_id=artifact_id,
            version=_optional_str(project_dict, "version"),
            description=_optional_str(project_dict, "description"),
            url=_optional_str(project_dict, "url"),
            scm_url=_optional_str(scm, "url"),
            developers=tuple(developers),
        )

    @staticmethod
    def parse_helm_config(helm_dict: dict[str, Any]) -> HelmConfig:
        """Build a HelmConfig out of the "helm" settings.

        JSON format:
        {
            "chart": "demo-chart",
            "type": ["kubernetes", "openshift"],
            "keywords": ["demo"],
            "engine": "gotpl"
        }

        Raises:
            UnknownVariantError: If a type is not a known helm type
            ValueError: If a field has the wrong type
        """
        if not isinstance(helm_dict, dict):
            raise ValueError("Helm configuration must be a JSON object")
        type_identifiers = _optional_str_list(helm_dict, "type") or []
        return HelmConfig(
            chart=_optional_str(helm_dict, "chart"),
            types=[HelmType.from_identifier(t) for t in type_identifiers],
            keywords=_optional_str_list(helm_dict, "keywords"),
            engine=_optional_str(helm_dict, "engine"),
        )

    @staticmethod
    def load_project_facts(project_file_path: str) -> ProjectFacts:
        """Load the project descriptor from a JSON file.

        Raises:
            FileNotFoundError: If the project file is not found
            json.JSONDecodeError: If the JSON file is invalid
            ValueError: If the project descriptor format is invalid
        """
        try:
            return JsonConfigParser.parse_project_facts(
                json.loads(open_file(project_file_path))
            )
        except FileNotFoundError:
            logging.error(f"Project file not found: {project_file_path}")
            raise
        except json.JSONDecodeError:
            logging.error(f"Invalid JSON in project file: {project_file_path}")
            raise
        except Exception as e:
            logging.error(f"Failed to load project file: {str(e)}")
            raise

    @staticmethod
    def load_helm_config(config_file_path: str) -> HelmConfig:
        """Load helm settings from a JSON file.

        The settings may be at the top level or nested under a "helm" key.

        Raises:
            FileNotFoundError: If the configuration file is not found
            json.JSONDecodeError: If the JSON file is invalid
            ValueError: If the configuration format is invalid
        """
        try:
            config = json.loads(open_file(config_file_path))
            if isinstance(config, dict) and "helm" in config:
                config = config["helm"]
            return JsonConfigParser.parse_helm_config(config)
        except FileNotFoundError:
            logging.error(f"Helm configuration file not found: {config_file_path}")
            raise
        except json.JSONDecodeError:
            logging.error(
                f"Invalid JSON in helm configuration file: {config_file_path}"
            )
            raise
        except Exception as e:
            logging.error(f"Failed to load helm configuration: {str(e)}")
            raise
