"""Convert judge standings pages into TestSys .dat interchange files."""

__version__ = "0.1.0"
