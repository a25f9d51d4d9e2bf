"""HOTP / TOTP generation primitives."""
