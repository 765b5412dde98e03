"""Command-line interface for the audio browser."""
