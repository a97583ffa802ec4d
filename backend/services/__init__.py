"""
Service layer: item projection and the services built on it.
"""
