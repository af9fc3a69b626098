"""Tonal scale generation for configured colors."""

import logging
from dataclasses import dataclass
from typing import Iterator, List, Tuple, Union

from .color import OklchColor, RawColor, normalize
from ..utils.config import BASE_SCALE_STEP, COLOR_VARIABLE_PREFIX
from ..utils.error import ColorParseError

logger = logging.getLogger(__name__)

# (target lightness, chroma factor) for steps 1 (lightest) to 9 (darkest).
# Chroma is reduced at the light and dark ends of the ladder.
SCALE_STEPS: Tuple[Tuple[float, float], ...] = (
    (0.95, 0.1),
    (0.85, 0.3),
    (0.75, 0.5),
    (0.65, 1.0),
    (0.55, 1.0),
    (0.45, 1.0),
    (0.35, 0.8),
    (0.25, 0.6),
    (0.15, 0.4),
)

SCALE_LENGTH = len(SCALE_STEPS)


def chroma_factor(index: int, steps=SCALE_STEPS) -> float:
    """Chroma multiplier for a 0-based step index, never negative."""
    return max(steps[index][1], 0.0)


class ColorScale:
    """Nine colors ordered from lightest (step 1) to darkest (step 9)."""

    __slots__ = ('_colors',)

    def __init__(self, colors):
        colors = tuple(colors)
        if len(colors) != SCALE_LENGTH:
            raise ValueError(f"A color scale needs {SCALE_LENGTH} colors, got {len(colors)}")
        self._colors = colors

    def step(self, number: int) -> OklchColor:
        """Return the color at 1-based step ``number``."""
        if not 1 <= number <= SCALE_LENGTH:
            raise IndexError(f"Scale steps run from 1 to {SCALE_LENGTH}, got {number}")
        return self._colors[number - 1]

    @property
    def base(self) -> OklchColor:
        return self.step(BASE_SCALE_STEP)

    def __getitem__(self, index):
        return self._colors[index]

    def __iter__(self) -> Iterator[OklchColor]:
        return iter(self._colors)

    def __len__(self) -> int:
        return SCALE_LENGTH

    def __eq__(self, other) -> bool:
        if not isinstance(other, ColorScale):
            return NotImplemented
        return self._colors == other._colors

    def __hash__(self) -> int:
        return hash(self._colors)

    def __repr__(self) -> str:
        return f"ColorScale({', '.join(c.to_css() for c in self._colors)})"

    def to_css(self) -> List[str]:
        return [color.to_css() for color in self._colors]


def generate_scale(base: OklchColor, steps=SCALE_STEPS) -> ColorScale:
    """Derive the nine-step tonal scale of a color.

    Lightness follows the fixed ladder and chroma is the base chroma times
    the step's factor. The hue never changes.
    """
    return ColorScale(
        base.with_lightness_chroma(lightness, base.chroma * chroma_factor(i, steps))
        for i, (lightness, _) in enumerate(steps)
    )


def generate_neutral_scale() -> ColorScale:
    """Return the achromatic scale used for the neutral palette and as fallback."""
    return generate_scale(OklchColor(0.0, 0.0, 0.0))


def scale_for(color: Union[RawColor, str]) -> ColorScale:
    """Normalize a color and build its scale, falling back to neutral on error."""
    try:
        return generate_scale(normalize(color))
    except ColorParseError as e:
        logger.warning(f"Using neutral scale for {color!r}: {e}")
        return generate_neutral_scale()


@dataclass(frozen=True)
class ColorVariations:
    """Named aliases over a scale."""
    weak: OklchColor
    light: OklchColor
    bright: OklchColor
    normal: OklchColor
    intense: OklchColor
    strong: OklchColor


def generate_variations(base: OklchColor) -> ColorVariations:
    scale = generate_scale(base)
    return ColorVariations(
        weak=scale.step(2),
        light=scale.step(3),
        bright=scale.step(4),
        normal=scale.step(5),
        intense=scale.step(6),
        strong=scale.step(7),
    )


def scale_variables(name: str, scale: ColorScale,
                    prefix: str = COLOR_VARIABLE_PREFIX) -> List[Tuple[str, str]]:
    """Custom properties for a scale: ``--<prefix>-<name>-1`` .. ``-9`` plus the base alias.

    Args:
        name: Color name, e.g. ``brand-a``
        scale: Scale to render
        prefix: Variable prefix

    Returns:
        List of (property, value) pairs in step order, base alias last
    """
    variables = [
        (f"--{prefix}-{name}-{number}", color.to_css())
        for number, color in enumerate(scale, start=1)
    ]
    variables.append((f"--{prefix}-{name}", scale.base.to_css()))
    return variables


__all__ = [
    'SCALE_STEPS',
    'SCALE_LENGTH',
    'ColorScale',
    'ColorVariations',
    'chroma_factor',
    'generate_scale',
    'generate_neutral_scale',
    'generate_variations',
    'scale_for',
    'scale_variables',
]
