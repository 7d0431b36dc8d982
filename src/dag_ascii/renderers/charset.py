"""Character sets for connector lines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CharSet(Enum):
    Unicode = "unicode"
    Ascii = "ascii"


@dataclass
class BranchChars:
    left_branch: str
    through_branch: str
    terminal_branch: str
    vertical: str
    horizontal: str

    @classmethod
    def unicode(cls) -> BranchChars:
        return cls(
            left_branch="├",
            through_branch="┬",
            terminal_branch="┐",
            vertical="│",
            horizontal="─",
        )

    @classmethod
    def ascii(cls) -> BranchChars:
        return cls(
            left_branch="+",
            through_branch="+",
            terminal_branch="+",
            vertical="|",
            horizontal="-",
        )

    @classmethod
    def for_charset(cls, cs: CharSet) -> BranchChars:
        if cs == CharSet.Unicode:
            return cls.unicode()
        return cls.ascii()
