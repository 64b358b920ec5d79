"""
Presentation Layer - HTTP endpoints and request/response handling.

This layer contains:
- api/: FastAPI routers, one module per service plus health and metrics
- dependencies/: FastAPI dependencies (bearer auth, store and handler wiring)
- app_factory.py: builds the FastAPI app every service serves
"""
