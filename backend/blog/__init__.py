"""Blog Application Package — users, posts, comments, and the client that drives them.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
