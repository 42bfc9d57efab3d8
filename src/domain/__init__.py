"""Domain layer - Ports the application depends on.

This layer contains the protocols (ports) the application layer programs
against. It has NO dependencies on any framework or infrastructure at
runtime - it is pure Python.

Structure:
- protocols/: Repository, unit of work, logger and current-user interfaces

The domain layer defines WHAT the application needs, not HOW it's implemented.
"""
