"""Recommendation, conversation and collaborator services."""
