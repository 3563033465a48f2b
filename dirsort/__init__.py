"""dirsort - sort the files of a directory into category subdirectories."""

__version__ = "0.1.0"

__all__ = ["__version__"]
