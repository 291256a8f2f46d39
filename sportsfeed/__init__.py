"""Headline and scoreboard snapshots written as small JSON files."""
