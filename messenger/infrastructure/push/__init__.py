from messenger.infrastructure.push.logging_push_gateway import LoggingPushGateway

__all__ = ["LoggingPushGateway"]
