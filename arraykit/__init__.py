"""Operations on integer sequences: statistics, transforms, frequencies, ranks and a command line."""

__version__ = "0.1.0"
__all__ = ["__version__"]