"""Shared Flask extensions (initialized in the app factory)."""
from __future__ import annotations

from flask_talisman import Talisman

talisman = Talisman()
