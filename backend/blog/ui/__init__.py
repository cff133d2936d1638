"""UI Layer — server-rendered Jinja2 pages driven by the blog API client.

Invariants:
    - Pages talk to the API only through BlogClient
    - Session entries live in cookies via CookieStorage
"""
