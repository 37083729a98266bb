"""Constants module for the swap system.

This module contains shared constants including error codes and
error messages to prevent string duplication and ensure consistency
across the codebase.
"""

from .errors import ErrorCodes, ErrorMessages

__all__ = ["ErrorCodes", "ErrorMessages"]
