"""Command-line tools for the FTX REST client."""
