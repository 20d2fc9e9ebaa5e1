"""mokareads — MoKa Reads catalog, snapshot, and search CLI."""

__version__ = "0.3.0"
