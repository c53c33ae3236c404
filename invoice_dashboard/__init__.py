"""Invoice Dashboard Package: query engine and JSON API for the invoicing dashboard.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
