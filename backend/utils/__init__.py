"""
Utility functions and decorators.
"""

from .error_handlers import handle_use_case_errors

__all__ = ["handle_use_case_errors"]
