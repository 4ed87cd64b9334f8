"""CLI package.

The ``cli`` sub-package contains the Click application for inspecting
the local configuration. Commands built on ``TwilioClientCommand`` are
wired up by the host CLI, not here.
"""
from __future__ import annotations
