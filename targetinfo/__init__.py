"""Target information toolkit.

Provides CLI for resolving compilation targets, see `libtargetinfo` for the library itself.
"""
