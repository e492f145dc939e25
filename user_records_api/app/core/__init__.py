"""
Core infrastructure: settings, logging, exceptions and the storage gateway.
"""
