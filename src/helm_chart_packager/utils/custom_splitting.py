# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed
# under the Apache License Version 2.0.
#
# This product includes software developed at Datadog
# (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import csv
from io import StringIO


class CustomSplit:
    def __init__(self, lower_case: bool = False):
        """
        Initialize CustomSplit.

        Args:
            lower_case: Lower-case every parsed value, used for identifiers
                        that are matched case-insensitively.
        """
        self.lower_case = lower_case

    def custom_split(self, input_string: str | None, delimiter: str = ",") -> list[str]:
        """
        Parse a delimited string with support for quoted values.

        Values are trimmed and blank values are dropped, so ``"a, ,b"``
        yields ``["a", "b"]``.
        """

        if input_string is None or not input_string.strip():
            return []

        try:
            reader = csv.reader(
                StringIO(input_string), delimiter=delimiter, skipinitialspace=True
            )
            parsed_values = next(reader)
            parsed_values = [v.strip() for v in parsed_values if v.strip()]
        except (csv.Error, StopIteration):
            # If CSV parsing fails, fall back to string split
            parsed_values = [
                v.strip() for v in input_string.split(delimiter) if v.strip()
            ]

        if self.lower_case:
            parsed_values = [v.lower() for v in parsed_values]

        return parsed_values
