"""Services Layer — one use case class per operation.

Invariants:
    - Use cases depend on the CustomerRepository protocol only
    - Business-rule outcomes are returned as ValidationResult; not-found is raised

Design Decisions:
    - One file per use case for locality
"""
