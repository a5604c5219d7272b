"""
Application module - Use cases and pure pipeline steps.
"""
