"""Lower bytecode for a small C-like language to Minecraft commands and write them out as a datapack."""

__version__ = "0.1.0"