"""Test-setup."""

from pngauss import config

# Test on CPU.
config.update("platform_name", "cpu")

# Double precision
config.update("enable_x64", True)
