"""Building blocks for steganography tools: bit-level message packing, media and WAVE containers, XML configuration, logging and plug-in interfaces."""

__version__ = "1.0.0"