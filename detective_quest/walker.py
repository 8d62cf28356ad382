"""Exploration state machine: moves a cursor over the room tree, one choice per step."""
import logging
from typing import Callable, Dict, List, Optional, Tuple

from .clue_set import ClueSet
from .config import KEY_BINDINGS
from .suspect_index import SuspectIndex
from .types import Choice, Room, StepResult, WalkerPhase

logger = logging.getLogger("detective_quest.walker")

Output = Callable[[str], None]
Prompt = Callable[[str], str]


def parse_choice(raw: str, bindings: Optional[Dict[str, Choice]] = None) -> Choice:
    """Map one line of player input to a Choice. Only a single bound key is accepted."""
    bindings = KEY_BINDINGS if bindings is None else bindings
    key = raw.strip().lower()
    if len(key) != 1:
        return "INVALID"
    return bindings.get(key, "INVALID")


class ExplorationWalker:
    """Walks the mansion from a start room until the player quits or a dead end ends the walk.

    The only mutable state is the current room and the phase. Clues are
    pushed into the ClueSet on every room entry when one is given; the
    SuspectIndex is only consulted for the hint shown to the player.
    """

    def __init__(
        self,
        start: Room,
        clue_set: Optional[ClueSet] = None,
        suspect_index: Optional[SuspectIndex] = None,
        quit_enabled: bool = True,
        dead_end_terminates: bool = False,
        output: Optional[Output] = None,
        bindings: Optional[Dict[str, Choice]] = None,
    ) -> None:
        if not quit_enabled and not dead_end_terminates:
            raise ValueError("Walker needs a way to stop: enable quit or dead-end termination")
        self.current = start
        self.clue_set = clue_set
        self.suspect_index = suspect_index
        self.quit_enabled = quit_enabled
        self.dead_end_terminates = dead_end_terminates
        self.bindings = KEY_BINDINGS if bindings is None else bindings
        self._output = output or print
        self._phase: WalkerPhase = "AT_ROOM"
        self._entered = False
        self.visited: List[str] = []

    @property
    def phase(self) -> WalkerPhase:
        return self._phase

    @property
    def finished(self) -> bool:
        return self._phase == "EXITED"

    def _key_for(self, choice: Choice) -> str:
        return next((k for k, c in self.bindings.items() if c == choice), "?")

    def _result(self, choice: Optional[Choice], moved: bool, messages: List[str]) -> StepResult:
        for line in messages:
            self._output(line)
        return StepResult(
            choice=choice,
            moved=moved,
            room_name=self.current.name,
            phase=self._phase,
            messages=messages,
        )

    def _visit(self, messages: List[str]) -> Tuple[Optional[str], Optional[str]]:
        """Collect the current room's clue and apply the dead-end rule."""
        room = self.current
        self.visited.append(room.name)
        new_clue: Optional[str] = None
        hint: Optional[str] = None
        if self.clue_set is not None:
            if room.clue:
                messages.append(f'Clue found: "{room.clue}"')
                if self.clue_set.insert(room.clue):
                    new_clue = room.clue
                if self.suspect_index is not None:
                    hint = self.suspect_index.lookup(room.clue)
                    if hint is not None:
                        messages.append(f"   (This clue points to: {hint})")
            else:
                messages.append("No clue in this room.")
        if self.dead_end_terminates and room.is_dead_end:
            messages.append(f"You reached the end of the path in the {room.name}.")
            self._phase = "EXITED"
            logger.info("Dead end reached at %s", room.name)
        return new_clue, hint

    def enter(self) -> StepResult:
        """Enter the start room. Must be called once before step()."""
        if self._entered:
            raise RuntimeError("Walker already entered the mansion")
        self._entered = True
        messages = [f"\nYou entered the {self.current.name}."]
        new_clue, hint = self._visit(messages)
        result = self._result(None, False, messages)
        result.new_clue, result.hint = new_clue, hint
        return result

    def menu(self) -> List[str]:
        room = self.current
        lines = [f"\nPaths available from the {room.name}:"]
        if room.left is not None:
            lines.append(f"  ({self._key_for('LEFT')}) Go to the {room.left.name} (left)")
        if room.right is not None:
            lines.append(f"  ({self._key_for('RIGHT')}) Go to the {room.right.name} (right)")
        if self.quit_enabled:
            lines.append(f"  ({self._key_for('QUIT')}) Stop exploring")
        return lines

    def step(self, choice: Choice) -> StepResult:
        if not self._entered:
            raise RuntimeError("Call enter() before step()")
        if self.finished:
            raise RuntimeError("Walker already exited")

        if choice in ("LEFT", "RIGHT"):
            target = self.current.left if choice == "LEFT" else self.current.right
            side = "left" if choice == "LEFT" else "right"
            if target is None:
                return self._result(choice, False, [f"There is no path to the {side}!"])
            logger.debug("%s -> %s (%s)", self.current.name, target.name, side)
            self.current = target
            messages = [f"\nYou went to the {target.name}."]
            new_clue, hint = self._visit(messages)
            result = self._result(choice, True, messages)
            result.new_clue, result.hint = new_clue, hint
            return result

        if choice == "QUIT" and self.quit_enabled:
            self._phase = "EXITED"
            logger.info("Exploration ended by the player in %s", self.current.name)
            return self._result(choice, False, ["\nYou ended the exploration."])

        return self._result("INVALID", False, ["Invalid option, try again."])

    def run(self, prompt: Prompt) -> None:
        """Drive the walk to the end, reading one line per step from prompt."""
        if not self._entered:
            self.enter()
        while not self.finished:
            for line in self.menu():
                self._output(line)
            try:
                raw = prompt("\nChoose your action: ")
            except EOFError:
                logger.info("Input closed; ending exploration in %s", self.current.name)
                self._phase = "EXITED"
                break
            self.step(parse_choice(raw, self.bindings))
