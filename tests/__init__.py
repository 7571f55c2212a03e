"""Tests for rpsprites."""
