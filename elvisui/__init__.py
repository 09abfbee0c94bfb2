"""Virtual UI tree, widgets, layouts and styles, with HTML and CSS text forms."""

__version__ = "0.1.0"