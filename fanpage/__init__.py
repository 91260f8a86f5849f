"""fanpage — scrape a handful of team pages into one locally served page."""

__version__ = "0.1.0"
