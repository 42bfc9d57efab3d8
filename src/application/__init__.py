"""Application layer - Use cases and orchestration.

This layer contains the application's use cases following the CQRS pattern:
- Commands: Write operations that change state
- Queries: Read operations that fetch data
- Behaviors: Cross-cutting pipeline stages (timing, validation, transactions)

Structure:
- commands/: Command dataclasses and handlers (write operations)
- queries/: Query dataclasses and handlers (read operations)
- validators/: Request validators run by the validation behavior
- behaviors/: Pipeline behaviors composed around every handler
- cqrs/: Request contracts, registry and dispatcher

The application layer orchestrates domain logic but contains no business rules.
"""
