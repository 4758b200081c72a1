"""
Search, filter and sort over a list of generated ideas.
"""

import re
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel

from ideaspark.models.idea import BusinessIdea


class SortField(str, Enum):
    NONE = "none"
    TITLE = "title"
    DIFFICULTY = "difficulty"
    COST = "cost"
    TIME = "time"
    REVENUE = "revenue"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class IdeaQuery(BaseModel):
    """Search term plus optional exact-match filters and a sort key.

    A filter left as None matches every idea.
    """

    term: str = ""
    category: Optional[str] = None
    difficulty: Optional[int] = None
    risk_level: Optional[str] = None
    sort_by: SortField = SortField.NONE
    order: SortOrder = SortOrder.ASC


def _digits(value: str) -> int:
    # "$2,000 - $8,000" sorts as 20008000, same as the cards have always sorted
    digits = re.sub(r"[^0-9]", "", value)
    return int(digits) if digits else 0


SORT_KEYS = {
    SortField.TITLE: lambda idea: idea.title.lower(),
    SortField.DIFFICULTY: lambda idea: idea.difficulty,
    SortField.COST: lambda idea: _digits(idea.startup_cost),
    SortField.TIME: lambda idea: _digits(idea.time_to_market),
    SortField.REVENUE: lambda idea: _digits(idea.potential_revenue),
}


class IdeaSearchService:

    def search(self, ideas: List[BusinessIdea], query: IdeaQuery) -> List[BusinessIdea]:
        term = query.term.strip().lower()

        def matches(idea: BusinessIdea) -> bool:
            if term and not any(term in text.lower() for text in (idea.title, idea.description, idea.category)):
                return False
            if query.category is not None and idea.category != query.category:
                return False
            if query.difficulty is not None and idea.difficulty != query.difficulty:
                return False
            if query.risk_level is not None and idea.risk_level != query.risk_level:
                return False
            return True

        results = [idea for idea in ideas if matches(idea)]

        if query.sort_by is not SortField.NONE:
            results.sort(key=SORT_KEYS[query.sort_by], reverse=query.order is SortOrder.DESC)
        return results

    def categories(self, ideas: List[BusinessIdea]) -> List[str]:
        return sorted({idea.category for idea in ideas})

    def risk_levels(self, ideas: List[BusinessIdea]) -> List[str]:
        return sorted({idea.risk_level for idea in ideas})
