"""
Shared exceptions and handler decorators.
"""
