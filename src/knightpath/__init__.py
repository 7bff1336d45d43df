"""Knight move validation and path finding over terrain grids."""

__version__ = "0.1.0"
