"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: WFS wire constants and fixed names
- exceptions: Custom exception hierarchy
"""
