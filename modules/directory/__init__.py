"""Leadership directory module."""

from modules.directory.directory_module import DirectoryModule

__all__ = ["DirectoryModule"]
