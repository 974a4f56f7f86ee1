"""
Lottery number scoring models

Available models:
- weighted_scoring: Strategy-weighted blend of frequency, hot/cold momentum,
  overdue ratio and pair co-occurrence signals
"""

from . import weighted_scoring

__all__ = [
    "weighted_scoring",
]
