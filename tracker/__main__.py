"""Runs the Initiative Tracker with `python -m tracker`."""

from tracker.main import main

main()
