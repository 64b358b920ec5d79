"""
Infrastructure Layer - Implementations of domain ports.

- persistence/: mutex-guarded in-memory stores
- security/: bearer token services
- push/: push delivery to connected users
"""
