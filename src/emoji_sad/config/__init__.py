"""Configuration: paths, persisted settings and allow list loading."""
