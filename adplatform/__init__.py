"""Advertising platform toolkit: moderation, validation, API catalogue and advertiser bot."""

__version__ = "1.1.0"