"""Dama: Turkish-style draughts with forced maximum captures and an AI opponent."""

__version__ = "0.1.0"
