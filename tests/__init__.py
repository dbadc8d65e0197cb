"""
Test suite for lotto-frequency

Contains:
- tests/unit/          : Unit tests for core, engine, CLI and scraper
"""
