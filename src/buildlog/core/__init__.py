"""Core data types for buildlog."""
