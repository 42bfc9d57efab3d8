"""Test suite for the catalog pipeline.

Test structure follows the test pyramid:
- unit/: Unit tests - behaviors, handlers, validators with mocked dependencies
- integration/: Integration tests - repository, unit of work and full
  dispatch against a real SQLite database file
"""
