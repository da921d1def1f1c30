"""Table thresholds for the dealer and player heuristics."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TableRules:
    """
    Thresholds that drive when each side draws.

    The player heuristic is deliberately simple and is not basic strategy.
    """

    # Dealer draws while its best total is below this (no soft/hard split)
    dealer_stands_on: int = 17

    # Player always draws below this total
    player_hits_below: int = 16

    # Player also draws below this total when holding an ace
    # or when the dealer shows one
    player_soft_hits_below: int = 19

    # Only count a blackjack on exactly two cards
    strict_blackjack: bool = False

    def __post_init__(self) -> None:
        """Validate threshold combinations."""
        for name in ("dealer_stands_on", "player_hits_below", "player_soft_hits_below"):
            value = getattr(self, name)
            if not 1 <= value <= 21:
                raise ValueError(f"{name} must be between 1 and 21")
        if self.player_soft_hits_below < self.player_hits_below:
            raise ValueError("player_soft_hits_below must be at least player_hits_below")

    @classmethod
    def strict(cls) -> "TableRules":
        """Default thresholds with two-card blackjacks only."""
        return cls(strict_blackjack=True)
