"""Decks application layer: deck and flashcard registry."""
