"""Terminal outcome of a game."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from chesslogic.core.enums import EndReason, Player


@dataclass(frozen=True)
class Result:
    winner: Optional[Player]
    reason: EndReason

    @staticmethod
    def win(winner: Player) -> Result:
        return Result(winner, EndReason.CHECKMATE)

    @staticmethod
    def draw(reason: EndReason) -> Result:
        return Result(None, reason)

    @property
    def is_draw(self) -> bool:
        return self.winner is None

    def __str__(self) -> str:
        if self.winner is None:
            return f"Draw by {self.reason.value}"
        return f"{self.winner.value.capitalize()} wins by {self.reason.value}"
