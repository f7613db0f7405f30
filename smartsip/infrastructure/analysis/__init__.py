"""
Portfolio analysis.

This module provides an offline rule-based analyzer for the current holdings.
"""

from .analyzer import RuleBasedAnalyzer

__all__ = ["RuleBasedAnalyzer"]
