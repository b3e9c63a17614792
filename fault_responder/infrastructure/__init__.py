"""
Infrastructure layer package.

Concrete adapters implementing the domain ports.
"""
