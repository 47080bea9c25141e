"""Core ring model: cell validation, gap derivation and the greedy defense pass."""
