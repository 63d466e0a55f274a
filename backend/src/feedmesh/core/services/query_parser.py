"""Free-text feed search query parsing."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class ParsedQuery:
    """Keyword and hashtag terms extracted from a search string."""

    keywords: List[str] = field(default_factory=list)
    hashtags: List[str] = field(default_factory=list)

    @property
    def terms(self) -> List[str]:
        """All terms, matched as an OR of case-insensitive substrings."""
        return [*self.keywords, *self.hashtags]


def parse_query(raw: Optional[str]) -> ParsedQuery:
    """Split on whitespace; ``#term`` is a hashtag (stored without ``#``), the rest keywords.

    >>> parse_query("hello #world foo")
    ParsedQuery(keywords=['hello', 'foo'], hashtags=['world'])
    """
    keywords: List[str] = []
    hashtags: List[str] = []

    for token in (raw or "").split():
        if token.startswith("#"):
            tag = token[1:]
            if tag:
                hashtags.append(tag)
        else:
            keywords.append(token)

    return ParsedQuery(keywords=keywords, hashtags=hashtags)
