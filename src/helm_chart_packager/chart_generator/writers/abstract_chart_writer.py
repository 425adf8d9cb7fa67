# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from abc import ABC, abstractmethod

from helm_chart_packager.chart_generator.chart_metadata import ChartMetadata


class ChartWriter(ABC):
    @abstractmethod
    def write(self, metadata: ChartMetadata) -> str:
        raise NotImplementedError
