"""
HighScoreEntry - one row of the ledger.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class HighScoreEntry:
    name: str
    score: int

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "score": self.score}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HighScoreEntry":
        """
        Build an entry from a persisted record.

        Raises ValueError if the record is not {name: str, score: int >= 0}.
        """
        name = data.get("name")
        score = data.get("score")
        if not isinstance(name, str):
            raise ValueError(f"Invalid high score name: {name!r}")
        if not isinstance(score, int) or isinstance(score, bool) or score < 0:
            raise ValueError(f"Invalid high score value: {score!r}")
        return cls(name=name, score=score)
