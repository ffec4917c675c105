"""Precinct grouping and outreach message generation."""
