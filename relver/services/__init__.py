"""Services composing the version core into release decisions."""
