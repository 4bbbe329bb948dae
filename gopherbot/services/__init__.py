"""Random gopher generation pipeline."""
