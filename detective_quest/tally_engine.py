"""Counts collected clues that point at an accused suspect and judges the accusation."""
import logging

from .clue_set import ClueSet
from .config import EVIDENCE_THRESHOLD
from .suspect_index import SuspectIndex
from .types import AccusationOutcome, Verdict

logger = logging.getLogger("detective_quest.tally_engine")


def verdict(count: int) -> Verdict:
    return "SUFFICIENT" if count >= EVIDENCE_THRESHOLD else "INSUFFICIENT"


def same_suspect(found: str, accused: str) -> bool:
    """Case-insensitive name comparison."""
    return found.lower() == accused.lower()


class TallyEngine:
    """Resolves collected clues through the SuspectIndex and tallies them per suspect."""

    def __init__(self, suspect_index: SuspectIndex) -> None:
        self.suspect_index = suspect_index

    def count_for_suspect(self, clue_set: ClueSet, accused: str) -> int:
        count = 0
        for clue in clue_set:
            suspect = self.suspect_index.lookup(clue)
            if suspect is not None and same_suspect(suspect, accused):
                count += 1
        return count

    def accuse(self, clue_set: ClueSet, accused: str) -> AccusationOutcome:
        if clue_set.is_empty():
            logger.info("Accusation without evidence")
            return AccusationOutcome(status="NO_EVIDENCE", accused=accused.strip(), count=0, verdict="INSUFFICIENT")
        name = accused.strip()
        if not name:
            logger.info("No accusation made")
            return AccusationOutcome(status="NO_ACCUSATION", accused="", count=0, verdict="INSUFFICIENT")
        count = self.count_for_suspect(clue_set, name)
        result = verdict(count)
        logger.info("Accused %r with %d matching clue(s): %s", name, count, result)
        return AccusationOutcome(status="RESOLVED", accused=name, count=count, verdict=result)
