"""Command-line interface for dirsort."""
