"""
Core functionality for the transcript digest application.

This package contains the sentence statistics, the extractive and model-backed
summarizers, and the factory that selects between them.
"""
