# config.py: colours and face geometry, built once and passed around.

from dataclasses import dataclass

MINUTE_HAND_STYLES = ("polygon", "line")

grey = (0.745, 0.745, 0.745)
black = (0, 0, 0)


# All colours are (r, g, b) with components between 0 and 1, the form
# cairo's set_source_rgb takes.
@dataclass(frozen=True)
class Palette:
    background: tuple = grey
    foreground: tuple = black
    tick: tuple = black
    dark: tuple = (0.1, 0.1, 0.15)
    highlight: tuple = (0.9, 0.9, 0.9)
    second_hand: tuple = (0.8, 0.1, 0.1)


@dataclass(frozen=True)
class FaceConfig:
    size: int = 600
    second_hand_length: int = 220
    minute_hand_length: int = 200
    hub_radius: int = 7
    minute_hand: str = "polygon"
    # 13 reproduces the old face, which drew the 12 o'clock mark twice
    tick_count: int = 12
    outline_width: float = 2.0
    second_hand_width: float = 2.0
    hand_line_width: float = 5.0
    interval: float = 0.01

    def __post_init__(self):
        if self.size <= 0:
            raise ValueError("size must be positive, got %r" % (self.size,))
        if not 200 <= self.second_hand_length <= 230:
            raise ValueError("second hand length must be between 200 and 230, got %r"
                             % (self.second_hand_length,))
        if self.minute_hand not in MINUTE_HAND_STYLES:
            raise ValueError("unknown minute hand style %r" % (self.minute_hand,))
        if self.tick_count < 0:
            raise ValueError("tick count can't be negative")
        if self.interval <= 0:
            raise ValueError("interval must be positive, got %r" % (self.interval,))

    @property
    def center(self):
        return (self.size // 2, self.size // 2)


default_palette = Palette()
default_config = FaceConfig()
