import pytest

from war.cards import Card
from war.game import GameEngine
from war.models import GameConfig, InvalidPlayerCount, MissingSingleton, Player, RoundState

from .helpers import NoShuffle, create_engine, start_game


def test_engine_rejects_single_player_table():
    with pytest.raises(InvalidPlayerCount, match="At least 2 players"):
        GameEngine(GameConfig(players=1))


def test_invalid_player_count_is_a_value_error():
    with pytest.raises(ValueError):
        create_engine(players=0)


def test_missing_pot_aborts_outcome_without_moving_cards():
    engine = start_game(create_engine(rng=NoShuffle()))
    engine.advance()
    engine.pot = None

    with pytest.raises(MissingSingleton, match="Pot not attached"):
        engine.advance()

    assert engine.current_state() == RoundState.DRAW
    assert engine.revealed_card(1) == Card("Clubs", "2")
    assert engine.revealed_card(2) == Card("Clubs", "3")
    assert engine.round_number == 0


def test_missing_status_aborts_draw_before_reveal():
    engine = start_game(create_engine())
    engine.status = None

    with pytest.raises(MissingSingleton, match="Status board not attached"):
        engine.advance()

    assert engine.current_state() == RoundState.GAME_START
    assert engine.revealed_card(1) is None
    assert engine.hand_size(1) == 26
    with pytest.raises(MissingSingleton):
        engine.current_status_text()


def test_advance_can_be_retried_once_resource_is_restored():
    engine = start_game(create_engine())
    engine.advance()
    pot = engine.pot
    engine.pot = None
    with pytest.raises(MissingSingleton):
        engine.advance()

    engine.pot = pot
    assert engine.advance() == RoundState.OUTCOME
    assert engine.total_cards() == 52


def test_reveal_from_empty_hand_is_a_no_op():
    player = Player(num=1)
    assert player.reveal_top() is None
    assert player.in_play == []


def test_unknown_player_lookup_raises_key_error():
    engine = start_game(create_engine())
    with pytest.raises(KeyError):
        engine.hand_size(3)
    with pytest.raises(KeyError):
        engine.revealed_card(0)


def test_read_accessors_raise_for_missing_pot():
    engine = start_game(create_engine())
    engine.pot = None
    with pytest.raises(MissingSingleton, match="Pot not attached"):
        engine.snapshot()
    with pytest.raises(MissingSingleton, match="Pot not attached"):
        engine.total_cards()


def test_snapshot_raises_for_missing_status_board():
    engine = start_game(create_engine())
    engine.status = None
    with pytest.raises(MissingSingleton, match="Status board not attached"):
        engine.snapshot()
