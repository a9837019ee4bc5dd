"""Dispatch layer and the service-manager contract."""
