"""Navigation databases, Mercator coordinates, raster map tiles and render-object basics for glass cockpit displays."""

__version__ = "0.0.1"

__all__ = [
    "binary_nav",
    "constants",
    "geographic",
    "nav_database",
    "nav_lists",
    "raster_map",
    "render",
]