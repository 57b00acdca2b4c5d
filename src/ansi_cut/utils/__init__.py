"""
Logging and environment helpers.
"""
