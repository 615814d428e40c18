"""
Mechanic skill scale.
"""

from enum import IntEnum


class SkillLevel(IntEnum):
    """Ordered proficiency levels, compared by rank."""
    JUNIOR = 1
    APPRENTICE = 2
    EXPERIENCED = 3
    MASTER = 4

    @property
    def ordinal(self) -> int:
        return int(self.value)

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "SkillLevel":
        try:
            return cls(ordinal)
        except ValueError:
            raise ValueError(f"Unknown skill ordinal: {ordinal}") from None

    @classmethod
    def parse(cls, text: str) -> "SkillLevel":
        """
        Parse a skill level from its name or ordinal.

        Args:
            text: Level name (any case) or ordinal, e.g. "master" or "4"

        Returns:
            The matching SkillLevel
        """
        cleaned = str(text).strip()
        if cleaned.isdigit():
            return cls.from_ordinal(int(cleaned))

        try:
            return cls[cleaned.upper()]
        except KeyError:
            raise ValueError(f"Unknown skill level: {text!r}") from None

    def __str__(self) -> str:
        return self.label
