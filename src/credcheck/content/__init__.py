"""
Page fetching and parsing module.
"""

from .document import ArticleDocument
from .fetcher import ContentFetcher

__all__ = ['ArticleDocument', 'ContentFetcher']
