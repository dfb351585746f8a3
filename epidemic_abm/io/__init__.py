"""Parquet schemas and output path conventions."""
