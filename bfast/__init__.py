"""Register repositories as blazingly fast and badge their READMEs."""

__version__ = "0.1.0"
