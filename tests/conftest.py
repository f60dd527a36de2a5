from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Sequence

import pytest

# Allow running the suite from a checkout without installing the package
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from complexplane.controller.session import SessionController  # noqa: E402
from complexplane.model.state import FormState, SessionState  # noqa: E402
from complexplane.view.renderer import PlaneRenderer  # noqa: E402


@dataclass
class RecordingSurface:
    """Surface fake that records every draw call as a tuple."""
    width: int = 600
    height: int = 600
    calls: list[tuple[Any, ...]] = field(default_factory=list)

    def clear(self) -> None:
        self.calls.append(("clear",))

    def line(self, start, end, color: str, width: float = 1.0) -> None:
        self.calls.append(("line", tuple(start), tuple(end), color, width))

    def polyline(self, points: Sequence, color: str, width: float = 1.0,
                 dash: Optional[tuple[float, float]] = None) -> None:
        self.calls.append(("polyline", [tuple(p) for p in points], color, width, dash))

    def text(self, position, text: str, color: str, font_size: int) -> None:
        self.calls.append(("text", tuple(position), text, color, font_size))

    def text_width(self, text: str, font_size: int) -> float:
        # Fixed-pitch approximation, good enough for placement checks
        return len(text) * font_size * 0.5

    def of_kind(self, kind: str) -> list[tuple[Any, ...]]:
        return [c for c in self.calls if c[0] == kind]

    def texts(self) -> list[str]:
        return [c[2] for c in self.of_kind("text")]

    def colors(self) -> set[str]:
        return {c[3] for c in self.of_kind("line")}


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def renderer(surface: RecordingSurface) -> PlaneRenderer:
    return PlaneRenderer(surface)


@pytest.fixture
def controller(renderer: PlaneRenderer) -> SessionController:
    ctrl = SessionController(SessionState(), FormState(), renderer)
    ctrl.reset()
    renderer.surface.calls.clear()
    return ctrl
