"""
ego - track wall-clock time and net line delta for a coding session.
"""

__version__ = "0.1.0"
