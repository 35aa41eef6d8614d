"""Version information for :mod:`halns`."""

VERSION = "0.1.0"
