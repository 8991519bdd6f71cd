"""
Step Tracker - distance and calorie summaries from activity logs.

This package contains the complete library:
- core: Parsing, formulas and report formatting
- config: Application configuration and logging setup
"""

__version__ = "0.1.0"
