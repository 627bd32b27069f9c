"""Run two commands joined by a pipe, from an input file to an output file, plus small text, byte, output and list helpers."""

__version__ = "0.1.0"