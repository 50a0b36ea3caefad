"""Shared pytest fixtures for the full charnorm test suite."""

from __future__ import annotations

from io import StringIO
from typing import Iterator

import pytest

from charnorm.telemetry.logger import InspectionLogger


@pytest.fixture
def inspection_log() -> Iterator[tuple[InspectionLogger, StringIO]]:
    """Provide an inspection logger writing into an in-memory stream.

    Only the handler added for the stream is removed on teardown.
    """

    stream = StringIO()
    run_logger = InspectionLogger(sink=stream)
    yield run_logger, stream
    run_logger.close()
