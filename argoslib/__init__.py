"""LED panel geometry, drawing and animation, a delta-updating LED subsystem, and file-based home-position storage."""

__version__ = "0.1.0"