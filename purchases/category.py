"""Purchase categories and their canonical text form."""

from __future__ import annotations

from enum import Enum


class Category(Enum):
    """Closed set of purchase categories, in report declaration order."""

    FOOD = "food"
    CULTURE = "culture"
    TECHNOLOGY = "technology"
    EDUCATION = "education"
    TRAVEL = "travel"
    PRESENTS = "presents"
    STYLE = "style"
    OTHER = "other"

    @classmethod
    def parse(cls, text: str) -> Category:
        """Map canonical text to a category.

        Matching is exact and case-sensitive. Anything that is not one of
        the named categories (including "" and "other") maps to OTHER.
        """
        for member in cls:
            if member is not cls.OTHER and member.value == text:
                return member
        return cls.OTHER

    def format(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value
