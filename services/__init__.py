"""Estimator services: totals, normalization, project state and export."""
