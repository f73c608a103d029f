"""Services Layer: managers that enforce domain invariants around store IO.

Invariants:
    - Managers receive their stores at construction (no module-level handles)
    - Managers never call each other
"""
