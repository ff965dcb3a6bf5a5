#!/usr/bin/env python3
"""
Formatting utilities for displaying analysis results in a terminal.
"""

import json

from .models.analysis import AnalysisResult, Impact, TrustLevel

LEVEL_LABELS = {
    TrustLevel.TRUSTED: "✅ Confiável",
    TrustLevel.QUESTIONABLE: "⚠️  Questionável",
    TrustLevel.SUSPICIOUS: "❌ Suspeito",
}

IMPACT_MARKERS = {
    Impact.POSITIVE: "+",
    Impact.NEGATIVE: "-",
    Impact.NEUTRAL: "·",
}


def result_to_json(result: AnalysisResult, indent: int = 2) -> str:
    """Serialize a result to its JSON wire form."""
    return json.dumps(result.to_dict(), ensure_ascii=False, indent=indent)


def format_analysis_result(result: AnalysisResult) -> str:
    """Format an analysis result for display."""
    lines = [
        "\n=== Análise de credibilidade ===",
        f"🔗 {result.url}",
        f"📊 Pontuação: {result.trust_score}/100 - {LEVEL_LABELS[result.trust_level]}",
        "",
        "📋 Indicadores:",
    ]

    for indicator in result.indicators:
        mark = "✓" if indicator.present else "✗"
        lines.append(f"  [{mark}] {indicator.name} (peso {indicator.weight})")
        lines.append(f"      {indicator.description}")

    if result.sensationalist_words:
        lines.extend([
            "",
            "🚨 Palavras sensacionalistas:",
            f"  {', '.join(result.sensationalist_words)}"
        ])

    if result.detailed_findings:
        lines.extend(["", "🔍 Observações:"])
        for finding in result.detailed_findings:
            lines.append(f"  {IMPACT_MARKERS[finding.impact]} {finding.category}: {finding.finding}")

    lines.extend(["", f"🕒 Analisado em {result.analyzed_at}", ""])
    return "\n".join(lines)
