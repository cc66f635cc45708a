"""Data models for TMDB titles and rendered pages."""
