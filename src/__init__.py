"""Gatehouse: GitHub login for web applications."""
