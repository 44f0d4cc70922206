"""
Query intent analysis.
"""

from .service import QueryIntentAnalyzer

__all__ = ["QueryIntentAnalyzer"]
