from __future__ import annotations

import random
from typing import Iterable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict


class Quote(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    text: str
    author: str
    category: str


DEFAULT_QUOTES: Tuple[Quote, ...] = (
    Quote(id=1, text="The only way to do great work is to love what you do.", author="Steve Jobs", category="motivation"),
    Quote(id=2, text="Innovation distinguishes between a leader and a follower.", author="Steve Jobs", category="innovation"),
    Quote(id=3, text="Stay hungry, stay foolish.", author="Steve Jobs", category="motivation"),
    Quote(id=4, text="Code is like humor. When you have to explain it, it's bad.", author="Cory House", category="programming"),
    Quote(id=5, text="First, solve the problem. Then, write the code.", author="John Johnson", category="programming"),
    Quote(id=6, text="Simplicity is the soul of efficiency.", author="Austin Freeman", category="programming"),
    Quote(id=7, text="The best time to plant a tree was 20 years ago. The second best time is now.", author="Chinese Proverb", category="motivation"),
    Quote(id=8, text="It does not matter how slowly you go as long as you do not stop.", author="Confucius", category="persistence"),
    Quote(id=9, text="Quality is not an act, it is a habit.", author="Aristotle", category="quality"),
    Quote(id=10, text="The only impossible journey is the one you never begin.", author="Tony Robbins", category="motivation"),
)


class QuoteCatalogue:
    """Read-only lookup over a fixed set of quotes."""

    def __init__(self, quotes: Iterable[Quote] = DEFAULT_QUOTES, rng: Optional[random.Random] = None):
        self._quotes = tuple(quotes)
        if not self._quotes:
            raise ValueError("QuoteCatalogue needs at least one quote")
        self._rng = rng or random.Random()

    def all(self) -> List[Quote]:
        return list(self._quotes)

    def random(self) -> Quote:
        return self._rng.choice(self._quotes)

    def by_category(self, category: str) -> List[Quote]:
        wanted = category.lower()
        return [q for q in self._quotes if q.category.lower() == wanted]

    def get(self, quote_id: int) -> Optional[Quote]:
        return next((q for q in self._quotes if q.id == quote_id), None)

    def categories(self) -> List[str]:
        # first-seen order
        return list(dict.fromkeys(q.category for q in self._quotes))
