"""Wordbank vocabulary service."""
