"""
Surface that records draw calls instead of painting them.
"""
from dataclasses import dataclass, field
from typing import List, Union

from src.core import Color, Path
from .base import TextStyle


@dataclass(frozen=True)
class FillCommand:
    path: Path
    color: Color


@dataclass(frozen=True)
class TextCommand:
    text: str
    path: Path
    h_offset: float
    v_offset: float
    style: TextStyle


DrawCommand = Union[FillCommand, TextCommand]


@dataclass
class RecordingSurface:
    """
    Keeps every draw call in ``commands``, in call order.

    Paths are copied on receipt; the renderer resets and reuses its
    scratch path right after each call.
    """
    commands: List[DrawCommand] = field(default_factory=list)

    def fill_path(self, path: Path, color: Color) -> None:
        self.commands.append(FillCommand(path.copy(), color))

    def draw_text_on_path(
            self,
            text: str,
            path: Path,
            h_offset: float,
            v_offset: float,
            style: TextStyle
    ) -> None:
        self.commands.append(TextCommand(text, path.copy(), h_offset, v_offset, style))

    @property
    def fills(self) -> List[FillCommand]:
        return [c for c in self.commands if isinstance(c, FillCommand)]

    @property
    def texts(self) -> List[TextCommand]:
        return [c for c in self.commands if isinstance(c, TextCommand)]

    def clear(self) -> None:
        self.commands.clear()
