import pytest
from PySide6.QtCore import QCoreApplication

from charstyle.core.sinks import MemorySink, BodyClassList
from charstyle.core.style_aggregator import StyleAggregator
from charstyle.models import (
    ColorSlots,
    SpecificColors,
    EntitySettings,
    StyleSettings,
)

ARIA = "character|Aria|aria.png"
SAM = "persona|Sam|sam.png"


@pytest.fixture(scope="session", autouse=True)
def qapp():
    """Qt application instance so signals and timers work."""
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def settings():
    """Default settings with two styled entities."""
    s = StyleSettings()
    s.character_settings[ARIA] = EntitySettings()
    s.character_settings[SAM] = EntitySettings(
        main_colors=ColorSlots(primary="#ff8800"),
        specific_colors=SpecificColors({"links": "#123456"}),
    )
    return s


@pytest.fixture
def sinks():
    return {
        "main": MemorySink("main"),
        "preview": MemorySink("preview"),
        "global": MemorySink("global"),
    }


@pytest.fixture
def aggregator(sinks):
    return StyleAggregator(
        main_sink=sinks["main"],
        preview_sink=sinks["preview"],
        global_sink=sinks["global"],
        body=BodyClassList(["theme-dark"]),
    )
