"""Flat-file serialisation of the filtered view."""
