"""Configuration utility for reedstyle."""

# Project version
VERSION = "0.3.0"

# Input size limit for the optimizer (in bytes)
MAX_CSS_SIZE = 5 * 1024 * 1024      # 5 MB

# Variable hoisting
HOIST_MIN_COUNT = 5
HOIST_MIN_LENGTH = 10
HOIST_DECLARATION_OVERHEAD = 10
HOIST_VARIABLE_PREFIX = '--_'

# Cascade layers emitted when the input uses @layer without naming any
DEFAULT_LAYERS = ('settings', 'bridge', 'theme', 'free')

# Color variables
COLOR_VARIABLE_PREFIX = 'rs-color'
NEUTRAL_COLOR_NAME = 'neutral'
BASE_SCALE_STEP = 5

# Logging
LOG_FILE = 'reedstyle.log'
LOG_LEVEL = 'INFO'

# Other settings
ENABLE_COLOR = True

# Exported config
__all__ = [
    'VERSION', 'MAX_CSS_SIZE',
    'HOIST_MIN_COUNT', 'HOIST_MIN_LENGTH', 'HOIST_DECLARATION_OVERHEAD',
    'HOIST_VARIABLE_PREFIX', 'DEFAULT_LAYERS',
    'COLOR_VARIABLE_PREFIX', 'NEUTRAL_COLOR_NAME', 'BASE_SCALE_STEP',
    'LOG_FILE', 'LOG_LEVEL', 'ENABLE_COLOR',
]
