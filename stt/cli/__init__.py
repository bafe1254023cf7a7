"""Command line interface for stt."""
