"""Output subsystem: renders init reports for the terminal."""

from flowmates.output.summary import render_summary

__all__ = ["render_summary"]
