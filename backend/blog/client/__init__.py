"""Client Data Access — async HTTP client for the blog API plus session storage.

Invariants:
    - Session state lives in a SessionStorage under "auth_token" and "user"
    - The client never interprets the token; it only forwards it
"""
