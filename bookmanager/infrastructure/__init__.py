"""Infrastructure Layer: database engine, SQL stores, logging setup.

Invariants:
    - Only this layer (and api/dependencies.py) touches AsyncSession
"""
