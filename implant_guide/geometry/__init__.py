"""
Deterministic placement engine.

Pure Python math. No mesh analysis, no state between calls.
Given clinical landmark scalars, produce a safe bounding box and an
ImplantSpec (length, diameter, angle, position, direction).
"""
