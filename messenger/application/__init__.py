"""
APPLICATION LAYER - Use cases.

- commands/: write operations (login, send message, connect, ...)
- queries/: read operations (profile, conversations, online users, ...)
- dto/: pydantic shapes handed to the presentation layer

Handlers are synchronous; FastAPI runs them on its worker threads and the
stores serialize access with their own locks.
"""
