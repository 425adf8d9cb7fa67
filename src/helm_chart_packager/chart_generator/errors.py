# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.


class ChartGenerationError(Exception):
    """Exception raised when a chart cannot be assembled, archived or attached."""

    pass
