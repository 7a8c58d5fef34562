"""A side-scrolling platformer: vectors and matrices, tile maps, player, enemies, scenes and a recording renderer."""

__version__ = "0.1.0"