"""Line-indexed text log buffer and a mouse-driven debug camera helper."""

from .mathutil import clamp

__all__ = ["TextLog", "debug_camera"]


class TextLog:
    """Append-only text buffer that keeps the start offset of every line."""

    def __init__(self):
        self.auto_scroll = True
        self._text = ""
        self._line_offsets = [0]

    @property
    def text(self):
        return self._text

    def clear(self):
        self._text = ""
        self._line_offsets = [0]

    def write(self, text):
        start = len(self._text)
        self._text += text
        self._line_offsets.extend(
            start + index + 1 for index, char in enumerate(text) if char == "\n"
        )

    def writeln(self, text):
        self.write(text + "\n")

    def lines(self):
        """The lines of the buffer without their newlines; ends with '' after a newline."""
        ends = [offset - 1 for offset in self._line_offsets[1:]] + [len(self._text)]
        return [
            self._text[start:end] for start, end in zip(self._line_offsets, ends)
        ]

    def __len__(self):
        return len(self._line_offsets)


def debug_camera(
    center,
    zoom,
    mouse_delta,
    dragging=False,
    wheel_down=False,
    wheel_up=False,
    min_zoom=0.1,
    max_zoom=40.0,
    zoom_incr=0.15,
):
    """Pan with a drag and zoom with the wheel; return the new ``(center, zoom)``.

    Wheel-down takes precedence over wheel-up; each zoom axis is clamped to
    ``[min_zoom, max_zoom]``.
    """
    cx, cy = center
    zx, zy = zoom
    dx, dy = mouse_delta

    if dragging:
        cx -= dx / zx
        cy += dy / zy

    if wheel_down:
        zx -= zoom_incr * zx
        zy -= zoom_incr * zy
    elif wheel_up:
        zx += zoom_incr * zx
        zy += zoom_incr * zy

    zx = clamp(zx, min_zoom, max_zoom)
    zy = clamp(zy, min_zoom, max_zoom)
    return (cx, cy), (zx, zy)