"""Grid objects, ANSI colouring and frame rendering for a terminal rock-paper-scissors arena."""

__version__ = "0.1.0"
__all__ = ["ansi", "model", "view"]