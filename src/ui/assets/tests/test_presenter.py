import unittest

from src.core.card import Card, Suit
from src.core.deck import Deck
from src.core.game import GameState, Side, new_game
from src.core.round_engine import GameOverReason, RoundOutcome, RoundStatus
from src.ui.presenter import (
    CONTINUE_MESSAGE, START_MESSAGE,
    card_label, count_line, round_info, status_message,
)
from src.ui.text_display import TextDisplay, run_text_game


def _outcome(**kw):
    base = dict(status=RoundStatus.CONTINUE, player_cards_remaining=27,
                computer_cards_remaining=25, round=1)
    base.update(kw)
    return RoundOutcome(**base)


def _cycling_state():
    # 2/5 against K/3 loops forever without either side running out
    return GameState(
        player_deck=Deck(cards=[Card(Suit.SPADES, "2"), Card(Suit.SPADES, "5")]),
        computer_deck=Deck(cards=[Card(Suit.HEARTS, "K"), Card(Suit.HEARTS, "3")]),
    )


class TestPresenter(unittest.TestCase):
    def test_round_messages(self):
        self.assertEqual(status_message(_outcome(round_winner=Side.PLAYER)),
                         "You win the round!")
        self.assertEqual(status_message(_outcome(round_winner=Side.COMPUTER)),
                         "Computer wins the round!")

    def test_war_is_called_out(self):
        msg = status_message(_outcome(round_winner=Side.PLAYER, wars=2))
        self.assertEqual(msg, "WAR! x2 - You win the round!")

    def test_game_over_messages(self):
        over = dict(status=RoundStatus.GAME_OVER, reason=GameOverReason.ALL_CARDS)
        self.assertEqual(status_message(_outcome(winner=Side.PLAYER, **over)), "You WIN!")
        self.assertEqual(status_message(_outcome(winner=Side.COMPUTER, **over)), "Computer WINS!")
        self.assertEqual(status_message(_outcome(winner=None, **over)), "It's a draw!")

    def test_round_info_and_counts(self):
        state = new_game(4)
        self.assertEqual(round_info(state), "Round 0 | Total Cards: 52")
        self.assertEqual(count_line(state), "You: 26  |  Computer: 26")
        self.assertEqual(count_line(_outcome()), "You: 27  |  Computer: 25")

    def test_round_info_from_outcome_ignores_later_rounds(self):
        state = new_game(4)
        out = _outcome(round=3)
        state.round = 4
        self.assertEqual(round_info(out), "Round 3 | Total Cards: 52")

    def test_card_label(self):
        self.assertEqual(card_label(Card(Suit.DIAMONDS, "Q")), "Q♦")
        self.assertEqual(card_label(None), "--")


class TestTextDisplay(unittest.TestCase):
    def test_render_outcome_shows_both_cards(self):
        state = new_game(4)
        out = _outcome(round_winner=Side.PLAYER,
                       initial_player_card=Card(Suit.SPADES, "A"),
                       initial_computer_card=Card(Suit.CLUBS, "3"))
        text = TextDisplay().render_outcome(out, state)
        self.assertIn("You played:      A♠", text)
        self.assertIn("Computer played: 3♣", text)
        self.assertIn("You win the round!", text)
        self.assertIn("Round 0 | Total Cards: 52", text)

    def test_auto_stops_when_game_ends(self):
        state = GameState(
            player_deck=Deck(cards=[Card(Suit.SPADES, "2")]),
            computer_deck=Deck(cards=[Card(Suit.HEARTS, "K")]),
        )
        lines = []
        run_text_game(state, auto=True, echo=lines.append)
        self.assertTrue(state.is_terminal())
        self.assertEqual(len(lines), 1)
        self.assertIn("Computer WINS!", lines[0])

    def test_auto_respects_round_cap(self):
        state = _cycling_state()
        lines = []
        run_text_game(state, auto=True, max_rounds=20, echo=lines.append)
        self.assertFalse(state.is_terminal())
        self.assertEqual(state.round, 20)
        self.assertIn("No winner after 20 rounds.", lines[-1])

    def test_interactive_commands(self):
        state = _cycling_state()
        commands = iter(["", "d", "r", "x", "n", "q"])
        lines = []
        run_text_game(state, echo=lines.append, read=lambda _prompt: next(commands))
        out = "\n".join(lines)
        self.assertIn(START_MESSAGE, lines[0])
        self.assertIn("You played:", out)
        self.assertIn(CONTINUE_MESSAGE, out)
        self.assertIn("Unknown command 'x'.", out)
        # "n" dealt a fresh full game
        self.assertEqual(state.round, 0)
        self.assertEqual(state.total_cards(), 52)

    def test_end_of_input_quits(self):
        def read(_prompt):
            raise EOFError
        state = new_game(8)
        self.assertIs(run_text_game(state, echo=lambda _s: None, read=read), state)
        self.assertEqual(state.round, 0)

    def test_draw_after_game_over_is_refused(self):
        state = GameState(
            player_deck=Deck(cards=[Card(Suit.SPADES, "A")]),
            computer_deck=Deck(cards=[Card(Suit.HEARTS, "2")]),
        )
        commands = iter(["d", "d", "q"])
        lines = []
        run_text_game(state, echo=lines.append, read=lambda _prompt: next(commands))
        self.assertIn("You WIN!", lines[1])
        self.assertIn("Game over", lines[2])
        self.assertEqual(state.round, 1)


if __name__ == "__main__":
    unittest.main()
