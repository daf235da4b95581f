"""twentyone: a text-driven blackjack table for humans and computer players."""

__version__ = "0.1.0"
