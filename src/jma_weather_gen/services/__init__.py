"""Shared utilities used across datasources.

- http: pre-configured ``requests`` session (User-Agent, default timeout)
"""
