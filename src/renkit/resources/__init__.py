"""Bundled data files for renkit (builtin area table)."""
