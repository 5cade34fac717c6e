"""Standalone NiceGUI app for the login dashboard."""
