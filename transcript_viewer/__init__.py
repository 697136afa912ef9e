"""YouTube transcript viewer: web front end, exports and player sync"""

__version__ = "1.0.0"
