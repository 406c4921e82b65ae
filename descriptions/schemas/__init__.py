"""JSON schemas for description documents."""
