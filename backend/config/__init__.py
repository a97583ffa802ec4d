"""
Configuration package.

Settings are read from environment variables; see app_config.py.
"""
