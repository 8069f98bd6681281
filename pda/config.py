#!/usr/bin/env python3
"""
Configuration Module - Global constants and settings
==================================================

This module contains the constants used by the address derivation code and
the HTTP wrapper around it. They are process-wide and never change at
runtime; the derivation constants must match the values used on-chain or
derived addresses stop being interoperable.

Constants defined here:
- Seed count and seed length limits
- Domain-separation marker appended to every derivation hash
- Address size and bump seed range
- HTTP server defaults
"""

# Derivation Configuration
# ========================
MAX_SEEDS = 16                          # Maximum number of seeds, bump seed included
MAX_SEED_LENGTH = 32                    # Maximum length of a single seed in bytes
PDA_MARKER = b"ProgramDerivedAddress"   # Hashed after the program id
MAX_BUMP = 255                          # First bump seed tried by the search

# Address Configuration
# =====================
ADDRESS_LENGTH = 32                     # Raw address size in bytes

# HTTP Configuration
# ==================
DEFAULT_HOST = "127.0.0.1"              # Web wrapper bind address
DEFAULT_PORT = 5000                     # Web wrapper port
