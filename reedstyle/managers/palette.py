"""Color palette management for reedstyle."""

import re
from typing import Any, Dict, List, Mapping, Tuple, Union

from .base import BaseManager
from ..core.color import RawColor, normalize
from ..core.scale import ColorScale, generate_neutral_scale, generate_scale, scale_variables
from ..utils.config import COLOR_VARIABLE_PREFIX, NEUTRAL_COLOR_NAME
from ..utils.error import ColorParseError, ConfigurationError

_COLOR_NAME = re.compile(r'^[a-z0-9][a-z0-9-]*$')


class PaletteManager(BaseManager):
    """Build tonal scales for the configured colors.

    A color that cannot be parsed gets the neutral scale instead, so a
    build never ships a partial palette.
    """

    manager_name = 'palette'
    error_class = ConfigurationError

    def __init__(self, prefix: str = COLOR_VARIABLE_PREFIX, include_neutral: bool = True):
        super().__init__()
        self.prefix = prefix
        self._scales: Dict[str, ColorScale] = {}
        self._fallbacks: List[str] = []
        if include_neutral:
            self._scales[NEUTRAL_COLOR_NAME] = generate_neutral_scale()

    def add_color(self, name: str, color: Union[RawColor, str]) -> ColorScale:
        """Register a color and return its scale.

        Args:
            name: Color name, lowercase letters, digits and dashes
            color: Color literal or RawColor

        Returns:
            The color's scale, or the neutral scale if it could not be parsed

        Raises:
            ConfigurationError: If the name is invalid
        """
        if not isinstance(name, str) or not _COLOR_NAME.match(name):
            raise ConfigurationError(f"Invalid color name: {name!r}")

        try:
            base = normalize(color)
        except ColorParseError as e:
            self.log_warning(f"Color {name!r} ({color!r}) falls back to neutral: {e}")
            self._fallbacks.append(name)
            scale = generate_neutral_scale()
        else:
            scale = generate_scale(base)
            self.log_debug(f"Color {name!r}: {base.to_css()}")

        self._scales[name] = scale
        return scale

    def add_colors(self, colors: Mapping[str, Union[RawColor, str]]) -> None:
        for name, color in colors.items():
            self.add_color(name, color)

    def get_scale(self, name: str) -> ColorScale:
        try:
            return self._scales[name]
        except KeyError:
            raise ConfigurationError(f"Unknown color: {name!r}") from None

    def scales(self) -> Dict[str, ColorScale]:
        return dict(self._scales)

    def css_variables(self) -> List[Tuple[str, str]]:
        """Custom properties for every color, in registration order."""
        variables = []
        for name, scale in self._scales.items():
            variables.extend(scale_variables(name, scale, self.prefix))
        return variables

    def to_css(self, selector: str = ':root') -> str:
        """Render the palette as one rule, ready for the optimizer."""
        body = ''.join(f"{prop}:{value};" for prop, value in self.css_variables())
        return f"{selector}{{{body}}}"

    def to_dict(self) -> Dict[str, List[str]]:
        return {name: scale.to_css() for name, scale in self._scales.items()}

    def get_stats(self) -> Dict[str, Any]:
        return {
            'colors': len(self._scales),
            'fallbacks': len(self._fallbacks),
            'fallback_names': list(self._fallbacks),
        }


__all__ = ['PaletteManager']
