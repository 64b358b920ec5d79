"""Prometheus metrics shared by all services."""
