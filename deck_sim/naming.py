"""Display names for cards and anything built from them."""

from functools import singledispatch
from typing import Any

from deck_sim.cards import Card
from deck_sim.game.trace import GameTrace, Round
from deck_sim.hand import Hand


@singledispatch
def to_name(value: Any) -> Any:
    """
    Replace every card in a value with its display name, keeping the shape.

    A Card becomes a string like 'Q♦'; hands, rounds, traces, lists and
    tuples become lists of their named elements.
    """
    raise TypeError(f"Cannot name a {type(value).__name__}")


@to_name.register
def _(value: Card) -> str:
    return value.name


@to_name.register(list)
@to_name.register(tuple)
@to_name.register(Hand)
@to_name.register(Round)
@to_name.register(GameTrace)
def _(value) -> list:
    return [to_name(item) for item in value]
