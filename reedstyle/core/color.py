"""Color normalization into the OKLCH color space."""

import math
import re
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from ..utils.error import (
    InvalidHexError,
    InvalidComponentError,
    UnsupportedFormatError,
)

# Linear sRGB -> LMS cone response
_LMS_MATRIX = (
    (0.4122214708, 0.5363325363, 0.0514459929),
    (0.2119034982, 0.6806995451, 0.1073969566),
    (0.0883024619, 0.2817188376, 0.6299787005),
)

# Compressed LMS -> OKLab
_OKLAB_MATRIX = (
    (0.2104542553, 0.7936177850, -0.0040720468),
    (1.9779984951, -2.4285922050, 0.4505937099),
    (0.0259040371, 0.7827717662, -0.8086757660),
)

# Below this chroma a color is treated as gray
ACHROMATIC_THRESHOLD = 1e-6

_HEX_DIGITS = re.compile(r'^[0-9a-fA-F]{6}$')
_FUNCTION = re.compile(r'^([a-zA-Z]+)\((.*)\)$', re.DOTALL)
_SEPARATORS = re.compile(r'[\s,/]+')

Number = Union[int, float, str]


@dataclass(frozen=True)
class OklchColor:
    """Canonical perceptual color.

    Lightness is kept in [0, 1], chroma is never negative and hue is
    always in [0, 360).
    """
    lightness: float
    chroma: float
    hue: float

    def __post_init__(self):
        object.__setattr__(self, 'lightness', min(max(float(self.lightness), 0.0), 1.0))
        object.__setattr__(self, 'chroma', max(float(self.chroma), 0.0))
        object.__setattr__(self, 'hue', normalize_hue(self.hue))

    def with_lightness_chroma(self, lightness: float, chroma: float) -> 'OklchColor':
        """Return a color with the same hue and new lightness/chroma."""
        return OklchColor(lightness, chroma, self.hue)

    def to_css(self) -> str:
        """Render as a CSS ``oklch()`` function, e.g. ``oklch(62.31% 0.188 259.8)``."""
        return f"oklch({self.lightness * 100:.2f}% {self.chroma:.3f} {self.hue:.1f})"

    def __str__(self) -> str:
        return self.to_css()


# Raw color variants, as produced by configuration parsing

@dataclass(frozen=True)
class HexColor:
    text: str


@dataclass(frozen=True)
class RgbColor:
    r: Number
    g: Number
    b: Number
    a: Optional[Number] = None


@dataclass(frozen=True)
class HslColor:
    h: Number
    s: Number
    l: Number
    a: Optional[Number] = None


@dataclass(frozen=True)
class OklchLiteral:
    text: str


RawColor = Union[HexColor, RgbColor, HslColor, OklchLiteral]


def normalize_hue(hue: float) -> float:
    """Wrap a hue in degrees into [0, 360)."""
    hue = float(hue) % 360.0
    # -1e-17 % 360 rounds to 360.0
    return 0.0 if hue >= 360.0 else hue


def parse_raw_color(text: str) -> RawColor:
    """Classify a color literal into its raw variant.

    Args:
        text: Color literal such as ``#3b82f6`` or ``hsl(210, 50%, 40%)``

    Returns:
        RawColor variant holding the unparsed components

    Raises:
        UnsupportedFormatError: If the notation is not recognized
        InvalidComponentError: If a function has the wrong number of arguments
    """
    if not isinstance(text, str):
        raise UnsupportedFormatError(f"Color must be a string, got {type(text).__name__}")

    literal = text.strip()
    if literal.startswith('#'):
        return HexColor(literal)

    match = _FUNCTION.match(literal)
    if not match:
        raise UnsupportedFormatError(f"Unsupported color format: {text!r}")

    name = match.group(1).lower()
    inner = match.group(2).strip()
    if name == 'oklch':
        return OklchLiteral(literal)
    if name not in ('rgb', 'rgba', 'hsl', 'hsla'):
        raise UnsupportedFormatError(f"Unsupported color function: {name}()")

    parts = [p for p in _SEPARATORS.split(inner) if p]
    if len(parts) not in (3, 4):
        raise InvalidComponentError(
            f"{name}() expects 3 or 4 components, got {len(parts)}: {text!r}")
    alpha = parts[3] if len(parts) == 4 else None
    if name.startswith('rgb'):
        return RgbColor(parts[0], parts[1], parts[2], alpha)
    return HslColor(parts[0], parts[1], parts[2], alpha)


def _to_number(value: Number, what: str, suffixes: Tuple[str, ...] = ()) -> Tuple[float, str]:
    """Parse a numeric component, returning (number, unit suffix)."""
    if isinstance(value, bool):
        raise InvalidComponentError(f"Invalid {what}: {value!r}")
    if isinstance(value, (int, float)):
        number, unit = float(value), ''
    else:
        raw = str(value).strip().lower()
        unit = ''
        for suffix in suffixes:
            if raw.endswith(suffix):
                raw, unit = raw[:-len(suffix)], suffix
                break
        try:
            number = float(raw)
        except ValueError:
            raise InvalidComponentError(f"Invalid {what}: {value!r}") from None
    if math.isnan(number) or math.isinf(number):
        raise InvalidComponentError(f"Invalid {what}: {value!r}")
    return number, unit


def _check_alpha(alpha: Optional[Number]) -> None:
    if alpha is None:
        return
    number, unit = _to_number(alpha, 'alpha', ('%',))
    limit = 100.0 if unit else 1.0
    if not 0.0 <= number <= limit:
        raise InvalidComponentError(f"Alpha out of range: {alpha!r}")


def hex_to_srgb(text: str) -> Tuple[float, float, float]:
    """Parse ``#RRGGBB`` into sRGB components in [0, 1]."""
    digits = text.strip()
    if digits.startswith('#'):
        digits = digits[1:]
    if not _HEX_DIGITS.match(digits):
        raise InvalidHexError(f"Expected #RRGGBB, got {text!r}")
    return tuple(int(digits[i:i + 2], 16) / 255.0 for i in (0, 2, 4))


def rgb_to_srgb(color: RgbColor) -> Tuple[float, float, float]:
    """Convert 0-255 (or percentage) channels to sRGB components in [0, 1]."""
    channels = []
    for name, value in (('red', color.r), ('green', color.g), ('blue', color.b)):
        number, unit = _to_number(value, f"{name} channel", ('%',))
        if unit == '%':
            number = number * 255.0 / 100.0
        if not 0.0 <= number <= 255.0:
            raise InvalidComponentError(f"{name} channel out of range: {value!r}")
        channels.append(number / 255.0)
    _check_alpha(color.a)
    return tuple(channels)


def hsl_to_srgb(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """Convert HSL (hue in degrees, saturation/lightness in [0, 1]) to sRGB.

    Uses the six-sector formula: C = (1 - |2L - 1|) * S,
    X = C * (1 - |(H / 60 mod 2) - 1|), m = L - C / 2.
    """
    h = normalize_hue(h)
    c = (1.0 - abs(2.0 * l - 1.0)) * s
    x = c * (1.0 - abs((h / 60.0) % 2.0 - 1.0))
    m = l - c / 2.0

    if h < 60.0:
        r, g, b = c, x, 0.0
    elif h < 120.0:
        r, g, b = x, c, 0.0
    elif h < 180.0:
        r, g, b = 0.0, c, x
    elif h < 240.0:
        r, g, b = 0.0, x, c
    elif h < 300.0:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return r + m, g + m, b + m


def _hsl_components(color: HslColor) -> Tuple[float, float, float]:
    hue, _ = _to_number(color.h, 'hue', ('deg',))
    values = []
    for name, value in (('saturation', color.s), ('lightness', color.l)):
        number, _ = _to_number(value, name, ('%',))
        if not 0.0 <= number <= 100.0:
            raise InvalidComponentError(f"{name} out of range: {value!r}")
        values.append(number / 100.0)
    _check_alpha(color.a)
    return hue, values[0], values[1]


def srgb_to_linear(c: float) -> float:
    """Inverse sRGB gamma."""
    return c / 12.92 if c <= 0.04045 else ((c + 0.055) / 1.055) ** 2.4


def _apply(matrix, vector):
    return tuple(sum(m * v for m, v in zip(row, vector)) for row in matrix)


def srgb_to_oklab(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert gamma-encoded sRGB in [0, 1] to OKLab (L, a, b)."""
    linear = (srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b))
    lms = _apply(_LMS_MATRIX, linear)
    compressed = tuple(math.copysign(abs(v) ** (1.0 / 3.0), v) for v in lms)
    return _apply(_OKLAB_MATRIX, compressed)


def srgb_to_oklch(r: float, g: float, b: float) -> OklchColor:
    """Convert gamma-encoded sRGB in [0, 1] to OKLCH."""
    lightness, a, b_ = srgb_to_oklab(r, g, b)
    chroma = math.hypot(a, b_)
    if chroma < ACHROMATIC_THRESHOLD:
        return OklchColor(lightness, 0.0, 0.0)
    hue = math.degrees(math.atan2(b_, a))
    return OklchColor(lightness, chroma, hue)


def _parse_oklch_literal(text: str) -> OklchColor:
    match = _FUNCTION.match(text.strip())
    if not match or match.group(1).lower() != 'oklch':
        raise UnsupportedFormatError(f"Not an oklch() literal: {text!r}")

    inner = match.group(2)
    alpha = None
    if '/' in inner:
        inner, alpha = inner.split('/', 1)
    parts = inner.split()
    if len(parts) != 3:
        raise InvalidComponentError(f"oklch() expects L C H, got {text!r}")

    lightness, unit = _to_number(parts[0], 'lightness', ('%',))
    if unit == '%':
        lightness /= 100.0
    chroma, _ = _to_number(parts[1], 'chroma')
    hue, _ = _to_number(parts[2], 'hue', ('deg',))
    if not 0.0 <= lightness <= 1.0:
        raise InvalidComponentError(f"Lightness out of range: {parts[0]!r}")
    if chroma < 0.0:
        raise InvalidComponentError(f"Chroma must not be negative: {parts[1]!r}")
    _check_alpha(alpha.strip() if alpha is not None else None)
    return OklchColor(lightness, chroma, hue)


def normalize(raw: Union[RawColor, str]) -> OklchColor:
    """Normalize any supported color into OKLCH.

    Args:
        raw: RawColor variant or a color literal string

    Returns:
        OklchColor value

    Raises:
        InvalidHexError: Hex input is not exactly six hex digits
        InvalidComponentError: A component is missing, not numeric or out of range
        UnsupportedFormatError: The notation is not recognized
    """
    if isinstance(raw, str):
        raw = parse_raw_color(raw)

    if isinstance(raw, HexColor):
        return srgb_to_oklch(*hex_to_srgb(raw.text))
    if isinstance(raw, RgbColor):
        return srgb_to_oklch(*rgb_to_srgb(raw))
    if isinstance(raw, HslColor):
        return srgb_to_oklch(*hsl_to_srgb(*_hsl_components(raw)))
    if isinstance(raw, OklchLiteral):
        return _parse_oklch_literal(raw.text)
    raise UnsupportedFormatError(f"Unsupported color value: {raw!r}")


def to_oklch_css(text: str) -> str:
    """Normalize a color literal and render it as ``oklch(L% C H)``."""
    return normalize(text).to_css()


__all__ = [
    'OklchColor',
    'HexColor',
    'RgbColor',
    'HslColor',
    'OklchLiteral',
    'RawColor',
    'normalize',
    'normalize_hue',
    'parse_raw_color',
    'hex_to_srgb',
    'rgb_to_srgb',
    'hsl_to_srgb',
    'srgb_to_linear',
    'srgb_to_oklab',
    'srgb_to_oklch',
    'to_oklch_css',
]
