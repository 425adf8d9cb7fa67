# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import yaml

from helm_chart_packager.chart_generator.chart_metadata import ChartMetadata
from helm_chart_packager.chart_generator.writers.abstract_chart_writer import (
    ChartWriter,
)


class YAMLChartWriter(ChartWriter):
    """
    Writes chart metadata in the Chart.yaml format read by helm.
    """

    def write(self, metadata: ChartMetadata) -> str:
        return yaml.safe_dump(
            metadata.to_dict(),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
