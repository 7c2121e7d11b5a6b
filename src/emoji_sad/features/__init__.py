"""Feature packages for emoji-sad."""
