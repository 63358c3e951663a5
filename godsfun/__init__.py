"""Building blocks for a multi-player Game of Life: creatures, fields, areas, model, players, input, view and game loop."""

__version__ = "0.1.0"