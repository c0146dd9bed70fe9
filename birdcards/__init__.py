"""Bird-identification flashcard backend."""
