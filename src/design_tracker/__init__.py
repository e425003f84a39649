"""Design Tracker - task tracking for design deliverables."""

__version__ = "1.0.0"
