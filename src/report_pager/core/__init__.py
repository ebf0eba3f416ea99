"""Core data models for report pagination."""
