"""UVCI parsing and verification.

The uvci layer converts an EU Digital COVID Certificate identifier string into an immutable
`ParsedRecord`. Malformed input never raises; missing information stays at field defaults.
"""
