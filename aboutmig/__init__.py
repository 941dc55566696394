"""Store information about yourself in a local JSON datafile, from the command line or as a library."""

__version__ = "0.1.6"