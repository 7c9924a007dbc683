import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from hoverpie.core.application.chart_service import compute_spans
from hoverpie.core.domain.models import Slice

@pytest.fixture
def quarter_slices():
    return [Slice("A", 0.5), Slice("B", 0.25), Slice("C", 0.25)]

@pytest.fixture
def quarter_spans(quarter_slices):
    return compute_spans(quarter_slices)

@pytest.fixture(scope="session")
def qapp():
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
