"""Fetch NOAA air-quality forecast pixel values for a batch of points."""

__version__ = "0.1.0"
