"""
Failures bounded context: domain layer.

- Failure categories and the per-request failure context
- Status-code and message resolution policy
- The exception-handling port implemented by responders
"""
