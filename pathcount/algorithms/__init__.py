"""Shortest-path counting algorithms."""
