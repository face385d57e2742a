"""Terminal frontend package."""
