"""Shared type aliases for readability and contract enforcement.

Tags travel as plain strings across process boundaries; the aliases below keep
canonical tag strings and raw ids from being mixed up.
"""
from __future__ import annotations

from typing import Callable, NewType, TypeAlias

TagString = NewType("TagString", str)

SuffixTranslator: TypeAlias = Callable[[str], str]
