#!/usr/bin/env python3
"""
Core data models for credibility analysis.

Contains all data structures handed to callers of the analyzer.
"""

from .analysis import AnalysisIndicator, AnalysisResult, Finding, Impact, TrustLevel

__all__ = ['AnalysisIndicator', 'AnalysisResult', 'Finding', 'Impact', 'TrustLevel']
