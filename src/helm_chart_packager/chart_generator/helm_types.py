# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import logging
from enum import Enum

from helm_chart_packager.utils.custom_splitting import CustomSplit

# Get application-specific logger
logger = logging.getLogger("helm_chart_packager")


class UnknownVariantError(ValueError):
    """Exception raised when a helm type identifier is not in the catalog."""

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        valid = [helm_type.identifier for helm_type in HelmType]
        super().__init__(
            f"Unknown helm type '{identifier}'. Valid types: {', '.join(valid)}"
        )


class HelmType(Enum):
    """
    Catalog of the chart flavours that can be generated.

    Each member holds (identifier, description, classifier, source_dir). The
    source_dir is the sub-directory of META-INF/fabric8 the resource manifests
    are generated into, the classifier tags the output directory and archive.
    """

    KUBERNETES = ("kubernetes", "Kubernetes", "kubernetes", "kubernetes")
    OPENSHIFT = ("openshift", "OpenShift", "openshift", "openshift")

    def __init__(
        self, identifier: str, description: str, classifier: str, source_dir: str
    ) -> None:
        self.identifier = identifier
        self.description = description
        self.classifier = classifier
        self.source_dir = source_dir

    @classmethod
    def from_identifier(cls, identifier: str) -> "HelmType":
        normalized = identifier.strip().lower()
        for helm_type in cls:
            if helm_type.identifier == normalized:
                return helm_type
        raise UnknownVariantError(identifier.strip())


DEFAULT_HELM_TYPE = HelmType.KUBERNETES


def select_helm_types(
    type_override: str | None, configured: list[HelmType] | None = None
) -> list[HelmType]:
    """Work out which chart flavours to build and in which order.

    A non-blank comma separated override wins, then the configured list, then
    the single default flavour. Duplicates are kept.

    Raises:
        UnknownVariantError: If an override token is not a known helm type.
    """
    if type_override is not None and type_override.strip():
        tokens = CustomSplit(lower_case=True).custom_split(type_override)
        selected = [HelmType.from_identifier(token) for token in tokens]
        if selected:
            logger.debug(
                f"Helm types from override: {[t.identifier for t in selected]}"
            )
            return selected
    if configured:
        return list(configured)
    return [DEFAULT_HELM_TYPE]
