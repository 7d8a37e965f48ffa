"""Hypothesis strategies for larakeys property-based testing."""
