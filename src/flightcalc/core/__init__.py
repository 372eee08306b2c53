"""Configuration and logging shared by all calculators."""
