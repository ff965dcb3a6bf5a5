#!/usr/bin/env python3
"""
Fixed vocabulary, selectors and patterns used by the heuristics.

Kept as reviewable tables so checks can be tuned without touching the
detector logic.
"""

import re

# Portuguese words/stems flagged as emotionally manipulative language
SENSATIONALIST_WORDS = [
    "chocante", "bombástico", "escândalo", "urgente", "inacreditável",
    "polêmico", "exclusivo", "revelado", "exposto", "denúncia",
    "vergonha", "absurdo", "surpreendente", "atenção", "alerta",
    "cuidado", "perigo", "golpe", "fraude", "mentira",
    "destruído", "arrasado", "explodiu", "devastador", "catastrófico",
]

# More distinct hits than this and the language is no longer "balanced"
MAX_BALANCED_SENSATIONALIST_HITS = 3

AUTHOR_SELECTORS = [
    'meta[name="author"]',
    'meta[property="article:author"]',
    '[rel="author"]',
    '.author',
    '.byline',
    '.post-author',
    '[itemprop="author"]',
]

# Keyword is case-insensitive, name tokens must be capitalized
AUTHOR_PATTERNS = [
    re.compile(r'(?i:por)\s+[A-Z][a-z]+\s+[A-Z][a-z]+'),  # por Maria Silva
    re.compile(r'(?i:escrito\s+por)\s+[A-Z][a-z]+'),       # Escrito por Maria
    re.compile(r'(?i:autor):\s*[A-Z][a-z]+'),               # Autor: Maria
]

# Minimum length of an author string before it counts
MIN_AUTHOR_LENGTH = 3

DATE_SELECTORS = [
    'meta[property="article:published_time"]',
    'meta[name="publish-date"]',
    'meta[name="date"]',
    'time[datetime]',
    '.publish-date',
    '.post-date',
    '[itemprop="datePublished"]',
]

DATE_PATTERNS = [
    re.compile(r'\d{1,2}/\d{1,2}/\d{2,4}'),                     # 01/01/2024
    re.compile(r'\d{1,2}\s+de\s+\w+\s+de\s+\d{4}', re.IGNORECASE),  # 1 de janeiro de 2024
    re.compile(r'\w+\s+\d{1,2},\s+\d{4}', re.IGNORECASE),          # janeiro 1, 2024
]

EXTERNAL_LINK_SELECTOR = 'a[href^="http"]'

SOCIAL_MEDIA_PATTERN = re.compile(
    r'(facebook|twitter|instagram|youtube|linkedin|whatsapp|telegram)',
    re.IGNORECASE,
)

# More external links than this count as cited sources
MIN_EXTERNAL_SOURCES = 2

CITATION_SELECTOR = 'blockquote, cite, q, [itemprop="citation"]'

# Narrative findings
OG_URL_SELECTOR = 'meta[property="og:url"]'
MAILTO_SELECTOR = 'a[href^="mailto:"]'
CONTACT_KEYWORDS = ["contato", "email"]
ABOUT_PAGE_SELECTOR = 'a[href*="about"], a[href*="sobre"]'

SUBSTANTIAL_WORD_COUNT = 500
BRIEF_WORD_COUNT = 200
