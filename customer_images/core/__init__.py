"""Core Layer — domain entities, rules and errors; no IO, no async.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - Rule functions are pure and deterministic (timestamps come from entities.utc_now)

Design Decisions:
    - Functional core separated from imperative shell: infrastructure/ loads and writes,
      core/ decides
"""
