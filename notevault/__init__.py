"""
Notes & Password Manager
Copyright (c) 2025

NOTICE AND THREAT MODEL:
This tool keeps notes and service passwords in memory only, for the lifetime
of a single desktop session. Nothing is written to disk or sent over a network.
Stored passwords are obfuscated with a reversible character shift, which is
NOT encryption: anyone with access to the running process can recover them.
"""

__version__ = "1.0"
