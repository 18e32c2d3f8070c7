"""
Roll calculation engine.

Pure Python math. Given the roll-to callout, the section size facing the
rolls and the stock on hand, produce the centerline geometry, the chord/rise
check, stick counts, helix pitch and plate nesting.
"""
