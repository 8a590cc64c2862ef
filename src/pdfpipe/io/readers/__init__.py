"""Readers turning input sources into text."""

from .txt_reader import read_text

__all__ = ["read_text"]
