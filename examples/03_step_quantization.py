"""
Step Quantization Example
=========================

A dimmer knob with 8 detents still needs a 256-entry table indexed by
the raw ADC reading. ``steps=8`` buckets the positions so exactly eight
distinct brightness levels come out.
"""

import numpy as np

import gammalut

print("=" * 60)
print("STEP QUANTIZATION EXAMPLE")
print("=" * 60)

table = gammalut.GammaTable("DIMMER_LEVELS", "u8", gamma=2.2, size=256, max_value=255, steps=8)

levels, first_positions = np.unique(table.values, return_index=True)
print(f"\nDistinct levels: {table.distinct_levels}")
for level, start in zip(levels, first_positions):
    print(f"  positions from {start:3}: {level}")

# Plot against a linear ramp (requires matplotlib: pip install gammalut[plot])
try:
    table.plot()
except ImportError as e:
    print(f"\nSkipping plot: {e}")
