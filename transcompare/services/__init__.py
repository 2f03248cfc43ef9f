"""Services around the comparison engine."""
