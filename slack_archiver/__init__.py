"""Slack thread archiver: save a Slack thread as a local Markdown + ZIP bundle."""

__version__ = "0.1.0"
