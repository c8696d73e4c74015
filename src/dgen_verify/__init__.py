"""dgen Verify - Pattern file validation."""
from .logic import validate_file, verify_file

__all__ = ["validate_file", "verify_file"]
