"""
Service layer abstraction.

Each service encapsulates business logic for one area.  Services talk
to storage only through ``core.storage.BaseStorage`` so the in‑memory
store can be replaced without changing API handlers.
"""
