"""Game flow: session start, exploration, clue listing, accusation and verdict."""
import logging
import time
from typing import Callable, List, Optional, Tuple

from .clue_set import ClueSet
from .config import INTROS, KEY_BINDINGS, LEVEL_ROOM_CLUES, LEVELS, SUSPECT_ASSOCIATIONS
from .mansion import build_mansion
from .suspect_index import SuspectIndex
from .tally_engine import TallyEngine
from .types import AccusationOutcome, LevelConfig, LevelName, Room
from .walker import ExplorationWalker

logger = logging.getLogger("detective_quest.game_orchestrator")

Output = Callable[[str], None]
Prompt = Callable[[str], str]


class GameOrchestrator:
    """Owns one session's mansion, ClueSet, SuspectIndex and walker, and runs the level's flow."""

    def __init__(
        self,
        level: LevelName = "master",
        output: Optional[Output] = None,
        mansion: Optional[Room] = None,
        suspect_index: Optional[SuspectIndex] = None,
    ) -> None:
        if level not in LEVELS:
            raise ValueError(f"Unknown level: {level}")
        self.level: LevelConfig = LEVELS[level]
        self.output = output or print
        self.mansion = mansion or build_mansion(clues=LEVEL_ROOM_CLUES[level])
        if suspect_index is None:
            suspect_index = SuspectIndex.build(SUSPECT_ASSOCIATIONS)
        self.suspect_index = suspect_index
        self.tally_engine = TallyEngine(self.suspect_index)

        self.clue_set: Optional[ClueSet] = None
        self.walker: Optional[ExplorationWalker] = None
        self._session_id: Optional[str] = None

    def start_game(self) -> Tuple[str, str]:
        session_id = time.strftime("%Y%m%d-%H%M%S")
        self._session_id = session_id
        self.clue_set = ClueSet() if self.level.collect_clues else None
        self.walker = ExplorationWalker(
            start=self.mansion,
            clue_set=self.clue_set,
            suspect_index=self.suspect_index if self.level.show_hints else None,
            quit_enabled=self.level.quit_enabled,
            dead_end_terminates=self.level.dead_end_terminates,
            output=self.output,
        )
        controls = ", ".join(f"'{k}' = {c.lower()}" for k, c in KEY_BINDINGS.items())
        intro = f"=== {self.level.title} ===\n{INTROS[self.level.name]}\nControls: {controls}"
        logger.info("Session %s started at level %s", session_id, self.level.name)
        return session_id, intro

    @property
    def session_id(self) -> Optional[str]:
        return self._session_id

    def explore(self, prompt: Prompt) -> None:
        if self.walker is None:
            raise RuntimeError("start_game() must be called first")
        self.walker.run(prompt)

    def collected_clues(self) -> List[str]:
        return self.clue_set.sorted_clues() if self.clue_set is not None else []

    def accuse(self, accused: str) -> AccusationOutcome:
        if not self.level.accusation:
            raise RuntimeError(f"Level {self.level.name} has no accusation phase")
        if self.clue_set is None:
            raise RuntimeError("start_game() must be called first")
        return self.tally_engine.accuse(self.clue_set, accused)

    def _print_clues(self) -> None:
        for clue in self.collected_clues():
            self.output(f" - {clue}")

    def accusation_phase(self, prompt: Prompt) -> Optional[AccusationOutcome]:
        self.output("\n=== Accusation Phase ===")
        if self.clue_set is None or self.clue_set.is_empty():
            self.output("You collected no clues; there is not enough evidence.")
            return self.accuse("") if self.clue_set is not None else None
        self.output("Collected clues:")
        self._print_clues()
        self.output(f"\nKnown suspects: {', '.join(self.suspect_index.suspects())}")
        try:
            accused = prompt("\nEnter the name of the suspect you want to accuse: ")
        except EOFError:
            accused = ""
        outcome = self.accuse(accused)
        self.output(self.describe_outcome(outcome))
        return outcome

    @staticmethod
    def describe_outcome(outcome: AccusationOutcome) -> str:
        if outcome.status == "NO_EVIDENCE":
            return "You collected no clues; there is not enough evidence."
        if outcome.status == "NO_ACCUSATION":
            return "No name given. No accusation was made."
        lines = [f"\n{outcome.accused} is linked to the crime by {outcome.count} clue(s)."]
        if outcome.sufficient:
            lines.append(f"\nValid accusation: there is enough evidence against {outcome.accused}.")
            lines.append("The case moves on to interrogation and a possible conviction.")
        else:
            lines.append(f"\nWeak accusation: not enough clues to hold {outcome.accused} responsible.")
            lines.append("Keep investigating.")
        return "\n".join(lines)

    def play(self, prompt: Prompt) -> Optional[AccusationOutcome]:
        """Run a whole session: intro, exploration, then the level's closing phase."""
        _, intro = self.start_game()
        self.output(intro)
        self.explore(prompt)
        outcome: Optional[AccusationOutcome] = None
        if self.level.accusation:
            outcome = self.accusation_phase(prompt)
        elif self.level.collect_clues:
            self.output("\nCOLLECTED CLUES (alphabetical order):")
            self._print_clues()
        self.output("\nThanks for playing Detective Quest!")
        logger.info("Session %s ended", self._session_id)
        return outcome
