"""Media application layer: secure image upload, retrieval and cleanup."""
