"""Utility helpers for renkit."""
