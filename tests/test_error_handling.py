import pytest

from tens.board import TensBoard
from tens.cards import parse_cards
from tens.deck import Deck
from tens.models import BoardConfig
from tens.rules import contains_pair_sum_10, count_rank, is_legal

from .helpers import create_board


def test_out_of_range_index_is_rejected():
    board = create_board(["4h", "6h"], size=4)
    with pytest.raises(ValueError, match="out of range: 4"):
        is_legal(board, [0, 4])
    with pytest.raises(ValueError, match="out of range: -1"):
        is_legal(board, [-1, 0])


def test_duplicate_index_is_rejected():
    board = create_board(["5h", "6h"])
    with pytest.raises(ValueError, match="Duplicate slot index: 0"):
        is_legal(board, [0, 0])


def test_empty_slot_reference_is_rejected():
    board = create_board(["4h", None, "6h"])
    with pytest.raises(ValueError, match="Slot is empty: 1"):
        is_legal(board, [0, 1])
    with pytest.raises(ValueError, match="Slot is empty: 5"):
        is_legal(board, [5])


def test_matchers_share_the_input_contract():
    board = create_board(["Jh", "Jd"])
    with pytest.raises(ValueError, match="Duplicate"):
        count_rank(board, [0, 1, 0], "jack")
    with pytest.raises(ValueError, match="out of range"):
        contains_pair_sum_10(board, [0, 99])


def test_wrong_size_selection_is_false_not_an_error():
    board = create_board(["4h", "6h", "5c"])
    assert is_legal(board, [0, 1, 2]) is False


def test_replacing_illegal_selection_raises():
    board = create_board(["4h", "7h"])
    with pytest.raises(ValueError, match="not a legal group"):
        board.replace_selected_cards([0, 1])
    assert board.labels()[:2] == ["4h", "7h"]


def test_new_game_requires_enough_cards():
    with pytest.raises(RuntimeError, match="Not enough cards"):
        TensBoard(Deck(parse_cards(["Ah", "2h"])), BoardConfig(size=3))


def test_board_rejects_bad_layouts():
    with pytest.raises(ValueError, match="Too many cards"):
        create_board(["Ah", "2h", "3h"], size=2)
    with pytest.raises(ValueError, match="must be positive"):
        TensBoard(Deck([]), BoardConfig(size=0))
    with pytest.raises(ValueError, match="Invalid card label"):
        create_board(["Ah", "Zz"])


def test_deal_many_raises_when_deck_exhausted():
    deck = Deck(parse_cards(["Ah", "Kd"]))
    deck.deal_many(2)
    with pytest.raises(ValueError, match="Not enough cards"):
        deck.deal_many(1)
    assert deck.deal() is None
