"""ChirpSig Utilities
"""
