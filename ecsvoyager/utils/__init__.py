"""Utility modules for ECS Voyager."""
