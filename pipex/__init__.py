"""Run a chain of commands from an input file to an output file, with small string and number helpers."""

__version__ = "0.1.0"