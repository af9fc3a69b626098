"""Manager factory for reedstyle."""

import logging
from typing import Dict, Any, Optional
from .base import BaseManager
from .optimizer import CSSOptimizer
from .palette import PaletteManager

class ManagerFactory:
    """Factory for creating and sharing the build managers."""

    def __init__(self):
        """Initialize manager factory."""
        self.logger = logging.getLogger(self.__class__.__name__)
        self._managers: Dict[str, BaseManager] = {}

    def create_optimizer(self, **options) -> CSSOptimizer:
        """Create the CSS optimizer.

        Args:
            **options: Passed to CSSOptimizer on first creation

        Returns:
            CSSOptimizer: Optimizer instance
        """
        name = CSSOptimizer.manager_name
        if name not in self._managers:
            self._managers[name] = CSSOptimizer(**options)
        return self._managers[name]

    def create_palette_manager(self, **options) -> PaletteManager:
        """Create the palette manager.

        Returns:
            PaletteManager: Palette manager instance
        """
        name = PaletteManager.manager_name
        if name not in self._managers:
            self._managers[name] = PaletteManager(**options)
        return self._managers[name]

    def get_manager(self, name: str) -> Optional[BaseManager]:
        return self._managers.get(name)

    def get_all_managers(self) -> Dict[str, BaseManager]:
        return self._managers.copy()

    def get_all_stats(self) -> Dict[str, Dict[str, Any]]:
        """Get statistics for all managers.

        Returns:
            Dict[str, Dict[str, Any]]: Dictionary of statistics for each manager
        """
        return {name: manager.get_stats() for name, manager in self._managers.items()}

    def cleanup_all(self) -> None:
        """Clean up all managers."""
        for name, manager in self._managers.items():
            try:
                manager.cleanup()
            except Exception as e:
                self.logger.error(f"Failed to cleanup {name} manager: {e}")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.cleanup_all()

# Exported class
__all__ = ['ManagerFactory']
