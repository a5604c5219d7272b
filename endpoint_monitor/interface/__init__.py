"""
Interface module - Entry points invoked by the scheduler.
"""
