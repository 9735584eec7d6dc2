"""Exocomp - maintenance bot for Wikibase instances."""

__version__ = "1.0.0"
