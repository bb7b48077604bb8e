"""
Core module - configuration, request context, errors and auth.
"""
