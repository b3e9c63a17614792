"""
Domain layer package.

Contains the failure vocabulary, the status-code policy and the
exception-handling contract. This layer has ZERO external dependencies.
No framework imports, no IO.
"""
