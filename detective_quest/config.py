"""Mansion layout, clue/suspect tables, key bindings and level presets."""
from typing import Dict, List, Optional, Tuple

from .types import Choice, LevelConfig, LevelName

START_ROOM = "Entrance Hall"

# room -> (left, right)
MANSION_LAYOUT: Dict[str, Tuple[Optional[str], Optional[str]]] = {
    "Entrance Hall": ("Living Room", "Kitchen"),
    "Living Room": ("Library", "Garden"),
    "Kitchen": (None, "Basement"),
    "Library": (None, None),
    "Garden": (None, None),
    "Basement": (None, "Study"),
    "Study": (None, None),
}

ROOM_CLUES: Dict[str, str] = {
    "Entrance Hall": "The key to the study is missing.",
    "Living Room": "A portrait with a red stain.",
    "Kitchen": "Muddy footprints near the window.",
    "Library": 'A torn page mentioning "Eleanor".',
    "Garden": "A handkerchief embroidered with 'M.R.'",
    "Basement": "Tool marks next to the safe.",
    "Study": "A note signed 'Marta R.'",
}

ADVENTURER_ROOM_CLUES: Dict[str, str] = {
    "Entrance Hall": "The key to the study is missing.",
    "Living Room": "A portrait with a strange mark.",
    "Kitchen": "Muddy footprints near the sink.",
    "Library": "A book torn from the shelf.",
    "Garden": "A handkerchief with mysterious initials.",
    "Basement": "A locked safe with no key.",
    "Study": "A torn note bearing the name 'Eleanor'.",
}

# novice rooms carry no clues
LEVEL_ROOM_CLUES: Dict[LevelName, Dict[str, str]] = {
    "novice": {},
    "adventurer": ADVENTURER_ROOM_CLUES,
    "master": ROOM_CLUES,
}

SUSPECT_ASSOCIATIONS: List[Tuple[str, str]] = [
    ("The key to the study is missing.", "Eleanor"),
    ("A portrait with a red stain.", "Carlos"),
    ("Muddy footprints near the window.", "Marta R."),
    ('A torn page mentioning "Eleanor".', "Eleanor"),
    ("A handkerchief embroidered with 'M.R.'", "Marta R."),
    ("Tool marks next to the safe.", "Carlos"),
    ("A note signed 'Marta R.'", "Marta R."),
]

KEY_BINDINGS: Dict[str, Choice] = {
    "e": "LEFT",
    "d": "RIGHT",
    "s": "QUIT",
}

EVIDENCE_THRESHOLD = 2

LEVELS: Dict[LevelName, LevelConfig] = {
    "novice": LevelConfig(
        name="novice",
        title="Detective Quest",
        collect_clues=False,
        show_hints=False,
        accusation=False,
        dead_end_terminates=True,
    ),
    "adventurer": LevelConfig(
        name="adventurer",
        title="Detective Quest: Gathering Clues",
        collect_clues=True,
        show_hints=False,
        accusation=False,
    ),
    "master": LevelConfig(
        name="master",
        title="Detective Quest: Final Judgement",
        collect_clues=True,
        show_hints=True,
        accusation=True,
    ),
}

INTROS: Dict[LevelName, str] = {
    "novice": (
        "Welcome to the mysterious mansion!\n"
        "You start your exploration in the Entrance Hall."
    ),
    "adventurer": "Welcome, detective! Explore the mansion and gather every clue.",
    "master": "You are the detective. Explore the mansion, collect clues and accuse a suspect.",
}
