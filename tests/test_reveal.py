from datetime import date

import pytest

from boosterforge.domain.cards import Card, CardSet, Pack, SlotResult
from boosterforge.domain.reveal import (
    RevealPhase,
    RevealState,
    advance,
    is_swipe_advance,
    reset_reveal,
    start_reveal,
)

CARD_SET = CardSet(set_id="base1", name="Base", series="Base", release_date=date(1999, 1, 9))


def make_pack(size: int) -> Pack:
    cards = tuple(Card(card_id=f"base1-{i}", name=f"Card {i}", rarity="Common") for i in range(size))
    return Pack.assemble(CARD_SET, [SlotResult("Common", size, cards)])


def test_start_reveal_shows_first_card():
    state = start_reveal(make_pack(3))
    assert state.phase is RevealPhase.REVEALING
    assert state.index == 0
    assert state.current.card.card_id == "base1-0"


def test_advance_walks_to_summary_once():
    state = start_reveal(make_pack(3))
    indices = [state.index]
    summaries = 0
    for _ in range(6):
        previous = state
        state = advance(state)
        assert state.index >= previous.index
        assert 0 <= state.index <= 2
        if state.phase is RevealPhase.SUMMARY and previous.phase is RevealPhase.REVEALING:
            summaries += 1
            assert previous.index == 2
        indices.append(state.index)

    assert summaries == 1
    assert indices[:4] == [0, 1, 2, 2]
    assert state.complete
    assert state.current is None


def test_empty_pack_goes_straight_to_summary():
    state = start_reveal(make_pack(0))
    assert state.phase is RevealPhase.SUMMARY
    assert advance(state) == state


def test_single_card_pack_completes_on_first_advance():
    state = advance(start_reveal(make_pack(1)))
    assert state.phase is RevealPhase.SUMMARY
    assert state.index == 0


def test_advance_without_pack_is_noop():
    state = RevealState()
    assert advance(state) is state
    assert state.phase is RevealPhase.NO_PACK


@pytest.mark.parametrize("steps", [0, 1, 5])
def test_reset_always_returns_to_no_pack(steps):
    state = start_reveal(make_pack(4))
    for _ in range(steps):
        state = advance(state)
    state = reset_reveal()
    assert state.phase is RevealPhase.NO_PACK
    assert state.pack is None
    assert state.index == 0
    assert state.total == 0


@pytest.mark.parametrize(
    ("start_x", "end_x", "expected"),
    [
        (100, 50, False),
        (101, 50, True),
        (300, 0, True),
        (50, 150, False),
        (80, 80, False),
    ],
)
def test_swipe_must_exceed_threshold_leftwards(start_x, end_x, expected):
    assert is_swipe_advance(start_x, end_x) is expected
