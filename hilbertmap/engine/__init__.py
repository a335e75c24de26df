"""Hilbert-curve engine: prefix codec, curve geometry and grid mappers."""
