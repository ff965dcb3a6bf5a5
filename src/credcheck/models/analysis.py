#!/usr/bin/env python3
"""
Analysis result data models.

Contains the indicator, finding and result records produced by one
credibility analysis, plus their JSON wire representation.
"""

from enum import Enum
from typing import List, Dict, Any
from dataclasses import dataclass


class TrustLevel(str, Enum):
    """Coarse trust bucket derived from the trust score."""
    TRUSTED = "trusted"
    QUESTIONABLE = "questionable"
    SUSPICIOUS = "suspicious"


class Impact(str, Enum):
    """Tone of a narrative finding."""
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class AnalysisIndicator:
    """One weighted binary credibility check."""
    name: str
    present: bool
    description: str
    weight: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'present': self.present,
            'description': self.description,
            'weight': self.weight
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AnalysisIndicator':
        return cls(
            name=data['name'],
            present=bool(data['present']),
            description=data['description'],
            weight=data['weight']
        )


@dataclass(frozen=True)
class Finding:
    """Narrative observation about the page; never scored."""
    category: str
    finding: str
    impact: Impact

    def to_dict(self) -> Dict[str, Any]:
        return {
            'category': self.category,
            'finding': self.finding,
            'impact': self.impact.value
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Finding':
        return cls(
            category=data['category'],
            finding=data['finding'],
            impact=Impact(data['impact'])
        )


@dataclass
class AnalysisResult:
    """
    Complete outcome of analysing one URL.

    Produced fresh for every call. ``to_dict`` yields the stable wire
    contract consumed by API/UI layers.
    """
    url: str
    trust_score: int
    trust_level: TrustLevel
    indicators: List[AnalysisIndicator]
    sensationalist_words: List[str]
    detailed_findings: List[Finding]
    analyzed_at: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase JSON payload."""
        return {
            'url': self.url,
            'trustScore': self.trust_score,
            'trustLevel': self.trust_level.value,
            'indicators': [indicator.to_dict() for indicator in self.indicators],
            'sensationalistWords': list(self.sensationalist_words),
            'detailedFindings': [finding.to_dict() for finding in self.detailed_findings],
            'analyzedAt': self.analyzed_at
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AnalysisResult':
        """Create AnalysisResult from the camelCase payload."""
        return cls(
            url=data['url'],
            trust_score=data['trustScore'],
            trust_level=TrustLevel(data['trustLevel']),
            indicators=[AnalysisIndicator.from_dict(item) for item in data.get('indicators', [])],
            sensationalist_words=list(data.get('sensationalistWords', [])),
            detailed_findings=[Finding.from_dict(item) for item in data.get('detailedFindings', [])],
            analyzed_at=data['analyzedAt']
        )

    def __repr__(self):
        return f"AnalysisResult(url='{self.url}', trust_score={self.trust_score}, trust_level='{self.trust_level.value}')"
