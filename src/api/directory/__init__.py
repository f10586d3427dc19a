"""User directory bounded context."""
