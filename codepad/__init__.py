"""Codepad: authenticated project storage for an HTML/CSS/JS snippet editor."""
