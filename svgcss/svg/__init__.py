"""SVG inspection, recoloring, optimization and CSS rule output."""
