"""Reproduction harness for nested exists / for-all query translation over a three-level hierarchy."""
