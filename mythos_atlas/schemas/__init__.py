"""Record Schemas — typed, immutable records returned by the resolution layer."""
