"""Artifact schemas shared by writers and readers."""
