"""
Venue box office: events and seat tickets kept in one ordered index
"""

__version__ = "1.0.0"
