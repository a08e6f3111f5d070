"""Version information for :mod:`rdftypemap`."""

VERSION = "0.1.0"
