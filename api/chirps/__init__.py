"""Chirp validation and profanity masking."""
