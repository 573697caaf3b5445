"""Reporting helpers: number formatting and executive-panel text."""
