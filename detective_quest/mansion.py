"""Builds the fixed mansion room tree from the layout tables."""
import logging
from typing import Dict, Iterator, List, Optional, Tuple

from .config import MANSION_LAYOUT, ROOM_CLUES, START_ROOM
from .types import Room

logger = logging.getLogger("detective_quest.mansion")


def build_mansion(
    layout: Optional[Dict[str, Tuple[Optional[str], Optional[str]]]] = None,
    clues: Optional[Dict[str, str]] = None,
    start: str = START_ROOM,
) -> Room:
    """Return the root room. Children are built before their parent since rooms are immutable."""
    layout = MANSION_LAYOUT if layout is None else layout
    clues = ROOM_CLUES if clues is None else clues
    if start not in layout:
        raise KeyError(f"Unknown start room: {start}")

    def build(name: str, seen: Tuple[str, ...]) -> Room:
        if name in seen:
            raise ValueError(f"Room {name} appears twice on the path {' -> '.join(seen)}")
        left_name, right_name = layout.get(name, (None, None))
        path = seen + (name,)
        left = build(left_name, path) if left_name else None
        right = build(right_name, path) if right_name else None
        return Room(name=name, clue=clues.get(name, ""), left=left, right=right)

    root = build(start, ())
    logger.debug("Mansion built from %r with %d rooms", start, sum(1 for _ in iter_rooms(root)))
    return root


def iter_rooms(root: Room) -> Iterator[Room]:
    """Pre-order walk over every room reachable from root."""
    stack: List[Room] = [root]
    while stack:
        room = stack.pop()
        yield room
        if room.right is not None:
            stack.append(room.right)
        if room.left is not None:
            stack.append(room.left)


def find_room(root: Room, name: str) -> Optional[Room]:
    return next((r for r in iter_rooms(root) if r.name == name), None)
