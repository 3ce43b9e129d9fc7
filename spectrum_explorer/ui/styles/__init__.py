"""Styles — colour palette and QSS theme."""
