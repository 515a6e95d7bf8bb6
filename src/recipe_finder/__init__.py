"""Recipe Finder: ranked recipe search over TheMealDB."""

__version__ = "2.0.0"
