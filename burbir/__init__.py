"""Tweets, reply trees, drafts, text-art profile pictures and tweet commands for a console micro-blogging app."""

__version__ = "0.1.0"