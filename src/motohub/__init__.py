"""MotoHub API: social backend for motorcycle riders."""
