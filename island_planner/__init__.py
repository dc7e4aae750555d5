"""Top-level package for the Island Route Planner project.

This package exposes the core modules used to answer two questions
about a small graph of travel destinations: the shortest tour that
visits a set of islands, and the longest chain of islands that fits
into an hour budget.
"""
