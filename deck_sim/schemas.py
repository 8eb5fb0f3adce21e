"""Pydantic schemas for presenting cards, rounds and traces."""

from pydantic import BaseModel, ConfigDict, Field

from deck_sim.cards import Card
from deck_sim.game.trace import GameTrace, Round


class CardSchema(BaseModel):
    """Card representation."""

    model_config = ConfigDict(frozen=True)

    rank: str
    suit: str
    index: int = Field(..., ge=0, lt=52)
    name: str

    @classmethod
    def from_card(cls, card: Card) -> "CardSchema":
        return cls(
            rank=card.rank.label,
            suit=card.suit.symbol,
            index=card.index,
            name=card.name,
        )


class RoundSchema(BaseModel):
    """One round: every hand after the round's discards."""

    number: int = Field(..., ge=0)
    hands: list[list[CardSchema]]
    discards: list[CardSchema] = Field(default_factory=list)

    @classmethod
    def from_round(cls, snapshot: Round) -> "RoundSchema":
        return cls(
            number=snapshot.number,
            hands=[[CardSchema.from_card(card) for card in hand] for hand in snapshot.hands],
            discards=[CardSchema.from_card(card) for card in snapshot.discards],
        )


class GameTraceSchema(BaseModel):
    """Full game trace."""

    rounds: list[RoundSchema]

    @classmethod
    def from_trace(cls, trace: GameTrace) -> "GameTraceSchema":
        return cls(rounds=[RoundSchema.from_round(snapshot) for snapshot in trace])
