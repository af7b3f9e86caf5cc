"""JSON parsing into a document model, with an event-driven incremental parser."""

__version__ = "0.1.0"

__all__ = ["dom", "errors", "parser", "string_number"]