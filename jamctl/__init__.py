"""Control state for a multiband audio mastering console: graphic EQ, compressors, crossover, labels and context help."""

__version__ = "0.1.0"