"""Clue -> suspect associations, built once before exploration starts."""
import logging
from typing import Dict, Iterable, List, Optional, Tuple

logger = logging.getLogger("detective_quest.suspect_index")


class SuspectIndex:
    """Read-only mapping from exact clue text to the suspect it points at."""

    def __init__(self) -> None:
        self._by_clue: Dict[str, str] = {}

    @classmethod
    def build(cls, associations: Iterable[Tuple[str, str]]) -> "SuspectIndex":
        index = cls()
        for clue, suspect in associations:
            if clue in index._by_clue:
                logger.debug("Association for %r replaced: %r -> %r", clue, index._by_clue[clue], suspect)
            # last write wins
            index._by_clue[clue] = suspect
        logger.debug("Suspect index built with %d clues", len(index._by_clue))
        return index

    def lookup(self, clue: str) -> Optional[str]:
        """Suspect for this exact (case-sensitive) clue, or None."""
        return self._by_clue.get(clue)

    def suspects(self) -> List[str]:
        return sorted(set(self._by_clue.values()))

    def __len__(self) -> int:
        return len(self._by_clue)
