"""DVB tuning helpers: frontend data model, LNB types, character sets, satellites, rotor files and repetition error correction."""

__version__ = "0.1.0"