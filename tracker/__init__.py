"""
Tracker package for the Initiative Tracker.

This package contains the modules for the turn-order tracker, including the
character model, the ordered roster, file import/export and the interactive
command loop.
"""
