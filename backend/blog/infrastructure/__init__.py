"""Infrastructure Layer — database sessions, credentials, logging setup.

Invariants:
    - Modules here perform IO or touch process-wide state; core/ never imports them
"""
