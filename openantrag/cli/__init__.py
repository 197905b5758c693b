"""Command-line tools for OpenAntrag Display."""
