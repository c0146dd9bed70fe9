"""
Media bounded context - Domain layer.

Uploaded flashcard images: the file record, the upload validation rules and
the mapping between image URLs and opaque file identifiers.
"""
