"""
Tests for StateTransitionEngine.

This module contains tests for the transition and rendering rules of each
kind of score state.
"""

import pytest

from tennisgame.errors import GameAlreadyWonError
from tennisgame.scoring.graph import ScoreGraph
from tennisgame.scoring.state import ADVANTAGE, DEUCE, WIN, Player, PlayerNames
from tennisgame.scoring.transitions import StateTransitionEngine

CONTEXT = PlayerNames("Alice", "Bob")


@pytest.fixture(scope="module")
def graph():
    return ScoreGraph()


@pytest.mark.parametrize(
    "score_a, score_b, expected",
    [
        (1, 0, "Fifteen-Love"),
        (0, 2, "Love-Thirty"),
        (3, 1, "Forty-Fifteen"),
        (2, 3, "Thirty-Forty"),
        (0, 0, "Love-All"),
        (1, 1, "Fifteen-All"),
        (2, 2, "Thirty-All"),
        (3, 3, "Deuce"),
        (4, 3, "Advantage Alice"),
        (3, 4, "Advantage Bob"),
        (4, 0, "Win for Alice"),
        (2, 4, "Win for Bob"),
    ],
)
def test_render(graph, score_a, score_b, expected):
    state = graph.lookup(score_a, score_b)
    assert StateTransitionEngine.render(state, CONTEXT) == expected
    assert state.render(CONTEXT) == expected


def test_render_uses_context_names():
    other = PlayerNames("Serena", "Venus")
    assert ADVANTAGE[Player.A].render(other) == "Advantage Serena"
    assert WIN[Player.B].render(other) == "Win for Venus"


def test_generic_transitions(graph):
    state = graph.lookup(2, 1)
    assert state.on_player_a_point(CONTEXT) is graph.lookup(3, 1)
    assert state.on_player_b_point(CONTEXT) is graph.lookup(2, 2)


def test_deuce_transitions():
    assert StateTransitionEngine.on_player_a_point(DEUCE, CONTEXT) is ADVANTAGE[Player.A]
    assert StateTransitionEngine.on_player_b_point(DEUCE, CONTEXT) is ADVANTAGE[Player.B]


def test_advantage_transitions():
    assert ADVANTAGE[Player.A].on_player_a_point(CONTEXT) is WIN[Player.A]
    assert ADVANTAGE[Player.A].on_player_b_point(CONTEXT) is DEUCE
    assert ADVANTAGE[Player.B].on_player_b_point(CONTEXT) is WIN[Player.B]
    assert ADVANTAGE[Player.B].on_player_a_point(CONTEXT) is DEUCE


@pytest.mark.parametrize("winner", [Player.A, Player.B])
@pytest.mark.parametrize("scorer", [Player.A, Player.B])
def test_win_rejects_every_point(winner, scorer):
    with pytest.raises(GameAlreadyWonError) as excinfo:
        StateTransitionEngine.point_won(WIN[winner], scorer, CONTEXT)
    assert excinfo.value.winner == CONTEXT.name_of(winner)
    assert CONTEXT.name_of(winner) in str(excinfo.value)


def test_point_won_requires_context(graph):
    with pytest.raises(ValueError):
        StateTransitionEngine.point_won(graph.root, Player.A, None)


def test_point_won_requires_player(graph):
    with pytest.raises(ValueError):
        StateTransitionEngine.point_won(graph.root, "A", CONTEXT)


def test_transitions_do_not_change_states(graph):
    state = graph.lookup(1, 2)
    before = (state.score_a, state.score_b, state.on_player_a, state.on_player_b)
    state.on_player_a_point(CONTEXT)
    state.on_player_b_point(CONTEXT)
    assert (state.score_a, state.score_b, state.on_player_a, state.on_player_b) == before
