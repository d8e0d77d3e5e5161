"""Resume Forge backend: resume parsing, master profile merging and tailoring."""

__version__ = "0.1.0"
