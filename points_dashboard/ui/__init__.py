"""Presentation: formatting, chart, dashboard and HTML export."""
