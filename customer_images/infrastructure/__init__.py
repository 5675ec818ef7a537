"""Infrastructure Layer — JSON file storage, the customer repository and logging setup.

Invariants:
    - Every file-system failure surfaces as StorageError, never a raw OSError
    - Repository mutations run core/ consistency checks before anything is written

Design Decisions:
    - Protocol boundaries (core/repository_protocols.py): services depend on shapes,
      not on the JSON implementation
"""
