# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def reset_application_logger() -> Iterator[None]:
    """CLI runs attach a stderr handler bound to the runner's stream, drop it."""
    yield
    app_logger = logging.getLogger("helm_chart_packager")
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
    app_logger.setLevel(logging.NOTSET)
