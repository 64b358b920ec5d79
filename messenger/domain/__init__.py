"""
DOMAIN LAYER

This layer contains:
- Entities: User, Message, Conversation, Connection
- Value Objects: ConversationId, Username, UserEmail
- Ports: Interfaces that the in-memory stores and token/push services implement
- Exceptions: Domain-specific errors

No framework imports and no I/O here; only the Python stdlib.
"""
