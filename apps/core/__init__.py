"""Core app package.

Holds the cross-cutting pieces shared by the domain apps: the API error
kinds and the exception handler that maps them to client responses, the
identity/ownership permission classes and identifier parsing for path
parameters.
"""
