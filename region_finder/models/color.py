from __future__ import annotations
from typing import NamedTuple, Sequence


class Color(NamedTuple):
    """
    Value-object for an 8-bit RGB color.
    """
    red: int
    green: int
    blue: int

    @classmethod
    def of(cls, red, green, blue) -> "Color":
        channels = (int(red), int(green), int(blue))
        for value in channels:
            if not 0 <= value <= 255:
                raise ValueError(f"Color channel out of range [0, 255]: {value}")
        return cls(*channels)

    @classmethod
    def from_pixel(cls, pixel: Sequence[int]) -> "Color":
        """Build a Color from an RGB(A) pixel, ignoring any alpha."""
        return cls.of(pixel[0], pixel[1], pixel[2])

    @classmethod
    def parse(cls, text: str) -> "Color":
        """
        Accepts "r,g,b" or "#RRGGBB".
        """
        s = text.strip()
        if s.startswith("#"):
            s = s[1:]
            if len(s) != 6:
                raise ValueError(f"Expected color like #RRGGBB, got {text!r}")
            try:
                return cls.of(int(s[0:2], 16), int(s[2:4], 16), int(s[4:6], 16))
            except ValueError as err:
                raise ValueError(f"Invalid hex color {text!r}: {err}") from err

        parts = [p.strip() for p in s.split(",")]
        if len(parts) != 3:
            raise ValueError(f"Expected color like r,g,b or #RRGGBB, got {text!r}")
        try:
            return cls.of(*(int(p) for p in parts))
        except ValueError as err:
            raise ValueError(f"Invalid color {text!r}: {err}") from err

    def to_hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"
