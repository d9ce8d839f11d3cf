"""
Internal DTOs

DTOs for service-to-service communication within the backend.
These are not exposed to external callers.
"""

from .use_case_result import UseCaseResult

__all__ = ["UseCaseResult"]
