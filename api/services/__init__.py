# services/__init__.py

from .listings import blocked_message, outcome_to_response
from .valuation import classify_verdict, compute_metrics

__all__ = [
    "blocked_message",
    "outcome_to_response",
    "classify_verdict",
    "compute_metrics",
]
