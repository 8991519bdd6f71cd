"""
Core business logic for step tracking.

This module has no I/O of its own: it turns input lines into reports
and nothing else, so it can be tested in isolation.
"""
