"""
Decks bounded context - Domain layer.

Users organise bird flashcards into decks. A deck is the ownership boundary
for everything it contains, uploaded images included.

Aggregates:
- Deck: a named collection owned by one user
- Flashcard: a bird name paired with an image reference
"""
