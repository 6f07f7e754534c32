"""Estimator test suite."""
