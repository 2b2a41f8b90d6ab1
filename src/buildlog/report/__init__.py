"""Reporting helpers for build passes."""
