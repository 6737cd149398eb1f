"""Payment Instructions Application Package — instruction interpreter and HTTP shell.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
