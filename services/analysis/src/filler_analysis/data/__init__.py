"""Packaged filler lexicon data."""
