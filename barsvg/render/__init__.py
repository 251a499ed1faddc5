"""Rendering side of barsvg: category axis, render pipeline and SVG sink."""
