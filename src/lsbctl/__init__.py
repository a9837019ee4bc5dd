"""lsbctl — LSB init-script commands over a pluggable service manager."""

__version__ = "0.1.0"
