"""Pydantic Schemas — API request/response contracts and the on-disk document shape.

Invariants:
    - Schemas validate at system boundaries (HTTP input, JSON file contents)
    - JSON field names are camelCase on the wire and on disk

Design Decisions:
    - Separate from core entities: schemas are contracts, entities are the domain
"""
