"""Utility modules for rmup: async filesystem primitives, Rich output and logging setup."""
