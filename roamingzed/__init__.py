"""RoamingZed - bidirectional wikilink AI integration for the Zed editor."""

__version__ = "0.1.0"
