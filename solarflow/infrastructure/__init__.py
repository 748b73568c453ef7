"""Infrastructure: document stores and entity serialization."""
