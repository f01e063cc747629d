"""Classic sequence algorithms on student grade data, with a printed guided tour."""

__version__ = "0.1.0"