"""Core scanning, resolution and deletion logic for rmup."""
