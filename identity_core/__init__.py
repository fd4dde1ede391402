"""
Identity and credential-verification core.

User identity records, password credentials and time-based one-time codes.
"""

__version__ = "0.1.0"
