"""Console output for the reedstyle command line."""

import sys
from typing import Any, Dict

import colorama
import orjson
from colorama import Fore, Style

from .config import ENABLE_COLOR

class UserInterface:
    """Handles console messages and result formatting."""

    def __init__(self, stream=None):
        self.verbose = False
        self.quiet = False
        self.output_format = 'text'
        self.stream = stream if stream is not None else sys.stderr
        self.use_color = ENABLE_COLOR
        # Leaves sys.stdout/sys.stderr in place; only Windows consoles are patched
        colorama.just_fix_windows_console()

    def set_verbosity(self, verbose: bool, quiet: bool):
        """Set verbosity level"""
        self.verbose = verbose
        self.quiet = quiet

    def set_output_format(self, format: str):
        """Set output format"""
        if format not in ('text', 'json'):
            raise ValueError(f"Unknown output format: {format}")
        self.output_format = format

    def _print(self, color: str, label: str, message: str):
        if self.use_color:
            print(f"{color}{label}: {message}{Style.RESET_ALL}", file=self.stream)
        else:
            print(f"{label}: {message}", file=self.stream)

    def print_info(self, message: str):
        if not self.quiet:
            self._print(Fore.BLUE, 'Info', message)

    def print_warning(self, message: str):
        if not self.quiet:
            self._print(Fore.YELLOW, 'Warning', message)

    def print_error(self, message: str):
        # Errors are shown even in quiet mode
        self._print(Fore.RED, 'Error', message)

    def print_success(self, message: str):
        if not self.quiet:
            self._print(Fore.GREEN, 'Success', message)

    def print_debug(self, message: str):
        if self.verbose and not self.quiet:
            self._print(Fore.CYAN, 'Debug', message)

    def format_output(self, data: Dict[str, Any]) -> str:
        """Format output data"""
        if self.output_format == 'json':
            return orjson.dumps(data, option=orjson.OPT_INDENT_2).decode('utf-8')
        return self._format_text_output(data)

    def _format_text_output(self, data: Dict[str, Any]) -> str:
        output = []
        for key, value in data.items():
            if isinstance(value, dict):
                output.append(f"{key}:")
                for k, v in value.items():
                    output.append(f"  {k}: {v}")
            elif isinstance(value, (list, tuple)):
                output.append(f"{key}:")
                for item in value:
                    output.append(f"  {item}")
            else:
                output.append(f"{key}: {value}")
        return "\n".join(output)

# Exported class
__all__ = ['UserInterface']
