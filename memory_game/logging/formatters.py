"""Formatters for game log output."""

from memory_game.models.card import Card, Deck


def format_card(card: Card) -> str:
    """Format a single card to string.

    Args:
        card: Card to format.

    Returns:
        Formatted string (e.g., "3:the-shining").
    """
    return f"{card.id}:{card.symbol}"


def format_deck(deck: Deck) -> list[str]:
    """Format a deck to its symbols in board order.

    Args:
        deck: Deck to format.

    Returns:
        List of symbols, index equals card id.
    """
    return deck.symbols()


def format_board(deck: Deck) -> str:
    """Format the visible board.

    Args:
        deck: Deck to format.

    Returns:
        Space separated cells: "?" face down, symbol face up,
        "[symbol]" matched.
    """
    return str(deck)
