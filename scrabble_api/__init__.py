"""Scrabble word validation and anagram API."""

__version__ = '0.2.0'
