"""Shared utilities for faqnav."""
