"""Single-round blackjack simulator with state machine."""

import logging
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum, auto
from random import Random
from typing import Callable

from transitions import Machine

from core.cards import Card, Deck
from core.game.events import EventEmitter, EventType, GameEvent
from core.game.state import GameState
from core.participants import (
    Blackjack,
    Bust,
    Continue,
    Dealer,
    DealOutcome,
    Participant,
    Player,
)
from core.rules import TableRules

logger = logging.getLogger(__name__)

Reporter = Callable[[str], None]


class Outcome(Enum):
    """How a round ended."""

    PLAYER_WINS = auto()
    DEALER_WINS = auto()
    PUSH = auto()
    PLAYER_BUST = auto()
    DEALER_BUST = auto()
    PLAYER_BLACKJACK = auto()

    @property
    def player_won(self) -> bool:
        return self in (Outcome.PLAYER_WINS, Outcome.DEALER_BUST, Outcome.PLAYER_BLACKJACK)

    @property
    def dealer_won(self) -> bool:
        return self in (Outcome.DEALER_WINS, Outcome.PLAYER_BUST)


@dataclass(frozen=True)
class RoundResult:
    """The reported result of one round."""

    outcome: Outcome
    winner: str | None
    player_score: int | None
    dealer_score: int | None
    message: str
    player_cards: tuple[Card, ...] = ()
    dealer_cards: tuple[Card, ...] = ()

    @property
    def ended_early(self) -> bool:
        """True when a bust or blackjack cut the round short."""
        return self.outcome in (
            Outcome.PLAYER_BUST,
            Outcome.DEALER_BUST,
            Outcome.PLAYER_BLACKJACK,
        )

    def __str__(self) -> str:
        return self.message


@dataclass
class SimulationSummary:
    """Tally of outcomes over many rounds."""

    counts: Counter = field(default_factory=Counter)

    def record(self, result: RoundResult) -> None:
        self.counts[result.outcome] += 1

    @property
    def rounds(self) -> int:
        return sum(self.counts.values())

    @property
    def player_wins(self) -> int:
        return sum(n for outcome, n in self.counts.items() if outcome.player_won)

    @property
    def dealer_wins(self) -> int:
        return sum(n for outcome, n in self.counts.items() if outcome.dealer_won)

    @property
    def pushes(self) -> int:
        return self.counts[Outcome.PUSH]

    def __str__(self) -> str:
        lines = [f"{self.rounds} rounds: player {self.player_wins}, "
                 f"dealer {self.dealer_wins}, push {self.pushes}"]
        for outcome in Outcome:
            lines.append(f"  {outcome.name.lower():<17} {self.counts[outcome]}")
        return "\n".join(lines)


class RoundSimulator:
    """
    Plays one dealer against one player, a round at a time.

    Every round gets a fresh deck, dealer and player. A bust or a player
    blackjack ends the round as soon as it is dealt; otherwise both sides
    draw in turn and the higher score wins.
    """

    STATES = [s.name.lower() for s in GameState]

    TRANSITIONS = [
        {"trigger": "start_round", "source": "*", "dest": "dealing"},
        {"trigger": "deal_complete", "source": "dealing", "dest": "player_turn"},
        {"trigger": "player_done", "source": "player_turn", "dest": "dealer_turn"},
        {"trigger": "dealer_done", "source": "dealer_turn", "dest": "resolving"},
        {
            "trigger": "end_round",
            "source": ["dealing", "player_turn", "dealer_turn", "resolving"],
            "dest": "round_complete",
        },
    ]

    def __init__(
        self,
        rules: TableRules | None = None,
        rng: Random | None = None,
        report: Reporter | None = None,
        deck_factory: Callable[[Random], Deck] | None = None,
    ) -> None:
        """
        Initialize the simulator.

        Args:
            rules: Draw thresholds (defaults if not provided)
            rng: Random source for every deck this simulator builds
            report: Sink for the one-line round summary (print if not provided)
            deck_factory: Builds each round's deck from the random source
        """
        self.rules = rules or TableRules()
        self._rng = rng or Random()
        self._report = report or print
        self._deck_factory = deck_factory or Deck
        self.events = EventEmitter()

        self.deck: Deck | None = None
        self.dealer: Dealer | None = None
        self.player: Player | None = None
        self.last_result: RoundResult | None = None

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="round_complete",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> GameState:
        """Get current round state as enum."""
        return GameState[self._machine_state.upper()]  # type: ignore

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to round events."""
        self.events.subscribe(handler, event_type)

    def play_round(self) -> RoundResult:
        """
        Deal and play out one round, then report it.

        Raises:
            PrematureScoreAccess: a score was read before a side was done
            EmptyDeckError: the deck ran out mid-round
        """
        self.start_round()
        self.deck = self._deck_factory(self._rng)
        self.dealer = Dealer(self.rules)
        self.player = Player(self.dealer, self.rules)
        self.events.clear_history()
        self.events.emit_new(EventType.ROUND_STARTED)

        result = self._play()

        self.end_round()
        self.last_result = result
        self.events.emit_new(
            EventType.ROUND_ENDED,
            outcome=result.outcome.name,
            winner=result.winner,
            player_score=result.player_score,
            dealer_score=result.dealer_score,
        )
        logger.info(result.message)
        self._report(result.message)
        return result

    def simulate_many(self, rounds: int) -> SimulationSummary:
        """Play independent rounds and tally their outcomes."""
        if rounds < 1:
            raise ValueError("rounds must be at least 1")
        summary = SimulationSummary()
        for _ in range(rounds):
            summary.record(self.play_round())
        logger.info("Simulated %d rounds: %s", rounds, dict(summary.counts))
        return summary

    def _play(self) -> RoundResult:
        dealer, player = self.dealer, self.player

        # Dealer, player, dealer, player
        for participant in (dealer, player, dealer, player):
            result = self._deal_to(participant)
            if result is not None:
                return result
        self.deal_complete()

        while player.wants_another_card():
            self.events.emit_new(EventType.PLAYER_HITS, hand_value=player.hand.best_value())
            result = self._deal_to(player)
            if result is not None:
                return result
        player.stand()
        self.events.emit_new(EventType.PLAYER_STANDS, hand_value=player.hand.best_value())
        self.player_done()

        while dealer.wants_another_card():
            self.events.emit_new(EventType.DEALER_HITS, hand_value=dealer.hand.best_value())
            result = self._deal_to(dealer)
            if result is not None:
                return result
        dealer.stand()
        self.events.emit_new(EventType.DEALER_STANDS, hand_value=dealer.hand.best_value())
        self.dealer_done()

        return self._resolve()

    def _deal_to(self, participant: Participant) -> RoundResult | None:
        """Deal one card; return a result if it ended the round."""
        card = self.deck.draw()
        outcome = participant.receive(card)
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card),
            hand=participant.name,
            hand_value=participant.hand.best_value(),
        )
        logger.debug("Dealt %s to %s: %s", card, participant, participant.hand)
        return self._early_result(outcome)

    def _early_result(self, outcome: DealOutcome) -> RoundResult | None:
        match outcome:
            case Continue():
                return None
            case Bust(participant=busted) if busted is self.dealer:
                self.events.emit_new(EventType.DEALER_BUSTS, hand=str(busted.hand))
                return self._result(Outcome.DEALER_BUST, self.player.name, str(outcome))
            case Bust(participant=busted):
                self.events.emit_new(EventType.PLAYER_BUSTS, hand=str(busted.hand))
                return self._result(Outcome.PLAYER_BUST, self.dealer.name, str(outcome))
            case Blackjack(participant=winner):
                self.events.emit_new(EventType.PLAYER_BLACKJACK, hand=str(winner.hand))
                return self._result(Outcome.PLAYER_BLACKJACK, winner.name, str(outcome))
        raise TypeError(f"Unknown deal outcome: {outcome!r}")

    def _resolve(self) -> RoundResult:
        """Compare final scores once both sides have stopped drawing."""
        player_score = self.player.final_score()
        dealer_score = self.dealer.final_score()
        player, dealer = self.player, self.dealer

        if player_score > dealer_score:
            self.events.emit_new(EventType.PLAYER_WINS)
            message = f"{player} wins {player_score} to {dealer_score}!"
            return self._result(Outcome.PLAYER_WINS, player.name, message)
        if dealer_score > player_score:
            self.events.emit_new(EventType.DEALER_WINS)
            message = f"{dealer} wins {dealer_score} to {player_score}!"
            return self._result(Outcome.DEALER_WINS, dealer.name, message)
        self.events.emit_new(EventType.PUSH)
        message = f"{player} tied {dealer} at {player_score}"
        return self._result(Outcome.PUSH, None, message)

    def _result(self, outcome: Outcome, winner: str | None, message: str) -> RoundResult:
        # best_value rather than final_score: an early finish may leave a side mid-draw
        return RoundResult(
            outcome=outcome,
            winner=winner,
            player_score=self.player.hand.best_value(),
            dealer_score=self.dealer.hand.best_value(),
            message=message,
            player_cards=tuple(self.player.hand.cards),
            dealer_cards=tuple(self.dealer.hand.cards),
        )
