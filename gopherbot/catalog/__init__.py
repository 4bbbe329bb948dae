"""Artwork catalog access and random selection."""
