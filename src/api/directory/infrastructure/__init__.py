"""Gateway and notifier implementations for the directory bounded context."""
