"""Terminal typing effect: a line of text typed out behind a blinking cursor."""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from framekit.core.config.models import VideoConfig
from framekit.core.motion.easing import BreakpointSet

CURSOR_CHAR = "█"
SCAN_LINE_OPACITY = BreakpointSet((0.0, 1.0, 2.0, 3.0), (0.03, 0.06, 0.03, 0.01))


class TerminalTypingConfig(BaseModel):
    """Options for the terminal typing effect."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    text: str = Field(description="Text to type out")
    color: str = Field(default="#33FF33", description="CSS text color")
    typing_speed: int = Field(
        default=4, gt=0, strict=True, description="Frames per revealed character"
    )
    cursor_blink: bool = True


class TerminalTypingFrame(BaseModel):
    model_config = ConfigDict(frozen=True)

    frame: int
    color: str
    displayed_text: str
    chars_revealed: int
    is_finished: bool
    cursor: str = CURSOR_CHAR
    cursor_visible: bool
    scan_line_opacity: float


class TerminalTypingEffect:
    effect_type: ClassVar[str] = "terminal_typing"
    config_model: ClassVar[type[BaseModel]] = TerminalTypingConfig

    def __init__(self, config: TerminalTypingConfig, video: VideoConfig) -> None:
        self._config = config
        self._video = video

    def frame_state(self, frame: int) -> TerminalTypingFrame:
        text = self._config.text
        chars = min(frame // self._config.typing_speed, len(text))

        # Half a second on, half a second off
        cursor_visible = True
        if self._config.cursor_blink:
            cursor_visible = int(frame // (self._video.fps / 2)) % 2 == 0

        return TerminalTypingFrame(
            frame=frame,
            color=self._config.color,
            displayed_text=text[:chars],
            chars_revealed=chars,
            is_finished=chars >= len(text),
            cursor_visible=cursor_visible,
            scan_line_opacity=SCAN_LINE_OPACITY.map(frame % 4),
        )
