# File: doodle/utils/errors.py
# Project: Doodle
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Errores tipados del proyecto.
# Notes: El modelo de color y layout es total; estos errores solo aparecen
#        en los bordes (parseo de texto externo, export a disco).
from __future__ import annotations


class DoodleError(Exception):
    """Base error for the project."""


class DoodleValidationError(DoodleError):
    """Malformed external input (color strings, empty folds...)."""


class DoodleIOError(DoodleError):
    """Read/write failure in a binding (SVG export, PNG save)."""
