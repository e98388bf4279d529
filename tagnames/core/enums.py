"""Enumerations shared across the tag subsystems.

The built-in tag kinds live in the core package so that the catalogue, the
config layer and callers can refer to them without circular imports.
"""
from __future__ import annotations

from enum import Enum


class TagKind(str, Enum):
    """Kinds registered in the catalogue at import time.

    Values are the prefixes used in the canonical ``"<kind>-<id>"`` form.
    """

    MACHINE = "machine"
    UNIT = "unit"
    APPLICATION = "application"
    MODEL = "model"
    CONTROLLER = "controller"
    USER = "user"
    ACTION = "action"
    SPACE = "space"
    CLOUD = "cloud"
