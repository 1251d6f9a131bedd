"""Render events emitted by the engine and commands flowing into it."""

from typing import Literal, Union

from pydantic import BaseModel


class CardRendered(BaseModel, frozen=True):
    """A face-down card was placed on the board."""

    type: Literal["card_rendered"] = "card_rendered"
    id: int
    position: int


class CardFlipped(BaseModel, frozen=True):
    """A card was turned face up."""

    type: Literal["card_flipped"] = "card_flipped"
    id: int
    symbol: str


class CardHidden(BaseModel, frozen=True):
    """A card was turned back face down."""

    type: Literal["card_hidden"] = "card_hidden"
    id: int


class ScoreChanged(BaseModel, frozen=True):
    """The session score changed."""

    type: Literal["score_changed"] = "score_changed"
    value: int


class GameWon(BaseModel, frozen=True):
    """All pairs were found."""

    type: Literal["game_won"] = "game_won"
    final_score: int


class BestScoreChanged(BaseModel, frozen=True):
    """A new best score was stored."""

    type: Literal["best_score_changed"] = "best_score_changed"
    value: int


class BoardCleared(BaseModel, frozen=True):
    """All card views should be removed."""

    type: Literal["board_cleared"] = "board_cleared"


RenderEvent = Union[
    CardRendered,
    CardFlipped,
    CardHidden,
    ScoreChanged,
    GameWon,
    BestScoreChanged,
    BoardCleared,
]


# Commands


class Start(BaseModel, frozen=True):
    """Start the first session."""

    type: Literal["start"] = "start"


class CardClicked(BaseModel, frozen=True):
    """Player clicked a card."""

    type: Literal["card_clicked"] = "card_clicked"
    id: int


class Reset(BaseModel, frozen=True):
    """Throw away the current session and deal again."""

    type: Literal["reset"] = "reset"


Command = Union[Start, CardClicked, Reset]
