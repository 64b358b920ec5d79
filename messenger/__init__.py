"""
Messenger backend.

Four independent HTTP services (auth, users, messages, connection registry)
built on a shared service-lifecycle base and mutex-guarded in-memory stores.
"""

__version__ = "1.0.0"
