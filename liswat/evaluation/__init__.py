"""Expansion and evaluation of liswat forms."""
