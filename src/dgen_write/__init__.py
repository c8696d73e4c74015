"""dgen Write - Pattern file generation."""
from .writer import create_file, overwrite_file

__all__ = ["create_file", "overwrite_file"]
