"""
Pydantic schema definitions for API payloads.

Posts, users and the newsletter/contact forms each define their own
request and response models.  The in‑memory store keeps ``PostRead``
and ``UserRead`` instances directly.
"""
