"""Shared types and data models for Detective Quest."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional

Choice = Literal["LEFT", "RIGHT", "QUIT", "INVALID"]
Verdict = Literal["SUFFICIENT", "INSUFFICIENT"]
AccusationStatus = Literal["NO_EVIDENCE", "NO_ACCUSATION", "RESOLVED"]
WalkerPhase = Literal["AT_ROOM", "EXITED"]
LevelName = Literal["novice", "adventurer", "master"]

LEVEL_NAMES: List[LevelName] = ["novice", "adventurer", "master"]


@dataclass(frozen=True)
class Room:
    """One room of the mansion (a node of the fixed binary tree)."""
    name: str
    clue: str = ""
    left: Optional["Room"] = None
    right: Optional["Room"] = None

    @property
    def is_dead_end(self) -> bool:
        return self.left is None and self.right is None


@dataclass(frozen=True)
class LevelConfig:
    """Feature switches for one game level."""
    name: LevelName
    title: str
    collect_clues: bool
    show_hints: bool
    accusation: bool
    quit_enabled: bool = True
    dead_end_terminates: bool = False


@dataclass
class StepResult:
    """Outcome of one walker step; choice is None for the first room entry."""
    choice: Optional[Choice]
    moved: bool
    room_name: str
    phase: WalkerPhase
    new_clue: Optional[str] = None
    hint: Optional[str] = None
    messages: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "choice": self.choice,
            "moved": self.moved,
            "room_name": self.room_name,
            "phase": self.phase,
            "new_clue": self.new_clue,
            "hint": self.hint,
            "messages": self.messages,
        }


@dataclass
class AccusationOutcome:
    """Result of the accusation phase."""
    status: AccusationStatus
    accused: str
    count: int
    verdict: Verdict

    @property
    def sufficient(self) -> bool:
        return self.verdict == "SUFFICIENT"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status,
            "accused": self.accused,
            "count": self.count,
            "verdict": self.verdict,
            "sufficient": self.sufficient,
        }
