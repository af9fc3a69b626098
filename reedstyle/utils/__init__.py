"""Shared utilities for reedstyle."""
