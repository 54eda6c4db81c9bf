"""Tests for jitic."""
