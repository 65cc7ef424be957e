"""
Core utilities shared across the account services.

This package hosts:
- configuration helpers (env vars, retention window, sweep schedule)
- credential hashing and activation key generation
- logging setup and the injectable clock
"""
