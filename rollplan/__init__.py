"""
Rolling geometry & material planning engine.

Pure numeric calculators for section and plate roll jobs: centerline
diameter, chord/rise checks, ring and stick counts, helix pitch and
developed diameter, plate arc nesting.
"""
