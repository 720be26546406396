import numpy as np
import pytest

from normplot.canvas import Canvas


class RecordingCanvas(Canvas):
    """Canvas that logs every primitive call instead of drawing."""

    def __init__(self):
        self.calls = []

    def draw_curve(self, fn, start, end, style):
        # Curves are recorded by a few sampled values since fn is a closure
        samples = tuple(float(y) for y in fn(np.linspace(start, end, 5)))
        self.calls.append(("draw_curve", start, end, samples, dict(style)))

    def draw_baseline(self, y):
        self.calls.append(("draw_baseline", y))

    def draw_axis(self, orientation, ticks, labels):
        self.calls.append(("draw_axis", orientation, list(ticks), list(labels)))

    def draw_segment(self, x0, y0, x1, y1, style):
        self.calls.append(("draw_segment", x0, y0, x1, y1, dict(style)))

    def fill_polygon(self, points, style):
        self.calls.append(("fill_polygon", [tuple(p) for p in points], dict(style)))

    def draw_text(self, x, y, text, style):
        self.calls.append(("draw_text", x, y, text, dict(style)))

    def named(self, name):
        return [call for call in self.calls if call[0] == name]


@pytest.fixture
def canvas():
    return RecordingCanvas()


@pytest.fixture
def make_canvas():
    return RecordingCanvas
