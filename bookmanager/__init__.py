"""Book Manager Application Package: authors, books and their association.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
