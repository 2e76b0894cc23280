"""
Core utilities shared across the forum API.

This package hosts:
- configuration helpers (env vars, pagination limits, database URL)
- cross-cutting services such as logging, request validation,
  response envelopes and password hashing.

Routers and services depend on these primitives instead of reading
os.environ or building JSON bodies by hand.
"""
