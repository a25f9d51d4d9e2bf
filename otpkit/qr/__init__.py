"""otpauth:// provisioning URI handling."""
