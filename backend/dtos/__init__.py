"""
Data Transfer Objects (DTOs) Layer

Contracts between callers and the use cases.

Structure:
- request/: Validated request models passed to ``execute``
- response/: Outgoing models that hide entity internals
- internal/: The ``UseCaseResult`` success/failure channel
"""
