import pytest

from detective_quest.game_orchestrator import GameOrchestrator
from detective_quest.types import Room

from conftest import ScriptedPrompt


def test_unknown_level_rejected(sink):
    with pytest.raises(ValueError):
        GameOrchestrator(level="expert", output=sink)


def test_start_game_builds_fresh_session(sink):
    orch = GameOrchestrator(output=sink)
    session_id, intro = orch.start_game()
    assert orch.session_id == session_id
    assert "Final Judgement" in intro
    assert "'e' = left" in intro
    assert orch.clue_set is not None and orch.clue_set.is_empty()
    assert orch.walker.suspect_index is orch.suspect_index


def test_explore_before_start_rejected(sink):
    with pytest.raises(RuntimeError):
        GameOrchestrator(output=sink).explore(ScriptedPrompt())


def test_master_level_sufficient_accusation(sink):
    # Hall (Eleanor) -> Living Room (Carlos) -> Library (Eleanor)
    prompt = ScriptedPrompt("e", "e", "s", "eleanor")
    outcome = GameOrchestrator(output=sink).play(prompt)
    assert outcome.status == "RESOLVED"
    assert outcome.count == 2
    assert outcome.verdict == "SUFFICIENT"
    assert "Valid accusation" in sink.text
    assert "(This clue points to: Eleanor)" in sink.text


def test_master_level_weak_accusation(sink):
    prompt = ScriptedPrompt("d", "d", "s", "Carlos")
    outcome = GameOrchestrator(output=sink).play(prompt)
    assert outcome.count == 1
    assert outcome.verdict == "INSUFFICIENT"
    assert "Weak accusation" in sink.text


def test_master_level_lists_clues_sorted_before_accusing(sink):
    GameOrchestrator(output=sink).play(ScriptedPrompt("d", "s", "Marta R."))
    listing = sink.lines.index("Collected clues:")
    assert sink.lines[listing + 1:listing + 3] == [
        " - Muddy footprints near the window.",
        " - The key to the study is missing.",
    ]
    assert "Known suspects: Carlos, Eleanor, Marta R." in sink.text


def test_master_level_blank_name_is_no_accusation(sink):
    outcome = GameOrchestrator(output=sink).play(ScriptedPrompt("s", "   "))
    assert outcome.status == "NO_ACCUSATION"
    assert "No accusation was made" in sink.text


def test_master_level_end_of_input_is_no_accusation(sink):
    outcome = GameOrchestrator(output=sink).play(ScriptedPrompt("s"))
    assert outcome.status == "NO_ACCUSATION"


def test_accuse_direct(sink):
    orch = GameOrchestrator(output=sink)
    orch.start_game()
    orch.explore(ScriptedPrompt("d", "d", "d", "s"))
    outcome = orch.accuse("MARTA R.")
    assert outcome.count == 2
    assert outcome.sufficient


def test_adventurer_level_lists_clues_without_accusation(sink):
    prompt = ScriptedPrompt("e", "d", "s")
    outcome = GameOrchestrator(level="adventurer", output=sink).play(prompt)
    assert outcome is None
    assert "COLLECTED CLUES (alphabetical order):" in sink.text
    assert "points to" not in sink.text
    assert "Accusation Phase" not in sink.text
    assert sink.lines[-4:-1] == [
        " - A handkerchief with mysterious initials.",
        " - A portrait with a strange mark.",
        " - The key to the study is missing.",
    ]


def test_adventurer_level_uses_its_own_clues(sink):
    orch = GameOrchestrator(level="adventurer", output=sink)
    assert orch.mansion.right.clue == "Muddy footprints near the sink."
    assert GameOrchestrator(level="master", output=sink).mansion.right.clue == "Muddy footprints near the window."
    assert GameOrchestrator(level="novice", output=sink).mansion.clue == ""


def test_adventurer_level_refuses_accusation_after_collecting_clues(sink):
    orch = GameOrchestrator(level="adventurer", output=sink)
    orch.start_game()
    orch.explore(ScriptedPrompt("e", "e", "s"))
    assert len(orch.clue_set) == 3
    assert orch.walker.suspect_index is None
    with pytest.raises(RuntimeError):
        orch.accuse("Eleanor")


def test_accuse_before_start_rejected(sink):
    with pytest.raises(RuntimeError):
        GameOrchestrator(output=sink).accuse("Eleanor")


def test_master_level_without_clues_reports_no_evidence(sink):
    bare = Room("Bare Hall", left=Room("Bare Closet"))
    prompt = ScriptedPrompt("e", "s", "Eleanor")
    outcome = GameOrchestrator(output=sink, mansion=bare).play(prompt)
    assert outcome.status == "NO_EVIDENCE"
    assert outcome.verdict == "INSUFFICIENT"
    assert "You collected no clues; there is not enough evidence." in sink.lines
    assert prompt.answers == ["Eleanor"]
    assert "Collected clues:" not in sink.lines


def test_novice_level_ends_at_dead_end(sink):
    prompt = ScriptedPrompt("d", "d", "d", "unused")
    outcome = GameOrchestrator(level="novice", output=sink).play(prompt)
    assert outcome is None
    assert prompt.answers == ["unused"]
    assert "end of the path in the Study" in sink.text
    assert "Clue found" not in sink.text
    assert sink.lines[-1] == "\nThanks for playing Detective Quest!"


def test_novice_level_has_no_accusation(sink):
    orch = GameOrchestrator(level="novice", output=sink)
    orch.start_game()
    assert orch.collected_clues() == []
    with pytest.raises(RuntimeError):
        orch.accuse("Eleanor")
