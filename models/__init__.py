"""Data models for the addition estimator."""
