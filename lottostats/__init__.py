"""
US lottery statistics: frequency, hot/cold, gap and co-occurrence analysis
plus weighted recommendation sets for five NY-published games.
"""

__version__ = "1.0.0"
