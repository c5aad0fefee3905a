"""Reader and writer for the TestSys .dat interchange format."""

from .decoder import DatDecoder, read_dat
from .encoder import DatEncoder, write_dat

__all__ = ["DatDecoder", "DatEncoder", "read_dat", "write_dat"]
