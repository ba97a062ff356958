"""Command line interface (Typer + Rich).

Thin layer over `starbuero.client`: argument parsing and presentation only.
"""
