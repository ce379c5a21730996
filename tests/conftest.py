import io

import pytest

from zoomline.models.enums import FocusMode, LogLevel
from zoomline.models.zoom_region import ZoomRegion
from zoomline.utils.logger import configure_logger, get_logger


@pytest.fixture(autouse=True)
def quiet_logger():
    """Route the logger singleton into a buffer and restore it afterwards."""
    logger = get_logger()
    saved = (logger.min_level, logger.use_colors, logger.stream)
    stream = io.StringIO()
    configure_logger(min_level=LogLevel.DEBUG, use_colors=False, stream=stream)
    yield stream
    configure_logger(*saved)


@pytest.fixture
def make_region():
    """
    Factory for zoom regions with fixed center focus by default.
    """
    counter = {"n": 0}

    def _make(start_ms, end_ms, scale=2.0, x=0.5, y=0.5, mode=FocusMode.FIXED, **kw):
        counter["n"] += 1
        return ZoomRegion(
            id=kw.pop("id", f"r{counter['n']}"),
            start_ms=start_ms,
            end_ms=end_ms,
            scale=scale,
            focus_mode=mode,
            target_x=x,
            target_y=y,
            **kw,
        )

    return _make
