"""Tests for the Foscam floodlight library."""
