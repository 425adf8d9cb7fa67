# Unless explicitly stated otherwise all files in this repository are
# licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog
# (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from helm_chart_packager.utils.custom_splitting import CustomSplit


def test_custom_split_simple_values() -> None:
    """Test CustomSplit with simple comma-separated values."""
    splitter = CustomSplit()
    result = splitter.custom_split("kubernetes, openshift")
    assert result == ["kubernetes", "openshift"]


def test_custom_split_quoted_values() -> None:
    """Test CustomSplit with quoted values containing commas."""
    splitter = CustomSplit()
    result = splitter.custom_split('"web, api", monitoring')
    assert result == ["web, api", "monitoring"]


def test_custom_split_blank_values_are_dropped() -> None:
    splitter = CustomSplit()
    result = splitter.custom_split("kubernetes, , openshift,")
    assert result == ["kubernetes", "openshift"]


def test_custom_split_lower_case() -> None:
    splitter = CustomSplit(lower_case=True)
    result = splitter.custom_split("Kubernetes,OPENSHIFT")
    assert result == ["kubernetes", "openshift"]


def test_custom_split_empty_string() -> None:
    """Test CustomSplit with empty string."""
    splitter = CustomSplit()
    assert splitter.custom_split("") == []
    assert splitter.custom_split("   ") == []
    assert splitter.custom_split(None) == []


def test_custom_split_different_delimiter() -> None:
    """Test CustomSplit with a different delimiter."""
    splitter = CustomSplit()
    result = splitter.custom_split("web; api; db", delimiter=";")
    assert result == ["web", "api", "db"]
