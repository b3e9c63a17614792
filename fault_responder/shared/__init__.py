"""
Shared module package.

Contains cross-cutting concerns:
- Mapping pipeline exceptions to error responses
- Logging configuration
"""
