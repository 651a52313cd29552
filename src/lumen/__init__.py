"""Lumen: undoable actions on a switchable bulb."""
