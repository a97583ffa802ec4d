"""
Domain Layer

This package contains the core business domain types, separated from
persistence concerns and infrastructure.

Structure:
- value_objects/: Immutable value types without identity
"""
