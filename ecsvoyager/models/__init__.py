"""Data models for ECS Voyager."""
