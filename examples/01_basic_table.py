"""
Basic Gamma Table Example
=========================

This example builds a 256-entry 8-bit gamma encoding table for an LED
driver and prints it as a C array ready to paste into firmware.
"""

import gammalut

# Example: PWM brightness for an 8-bit LED channel
# Perceived brightness is roughly linear in PWM duty^(1/2.2), so the
# firmware looks up duty = table[brightness] instead of calling pow().

print("=" * 60)
print("BASIC GAMMA TABLE EXAMPLE")
print("=" * 60)

# 1. Describe the table
table = gammalut.GammaTable(
    name="GAMMA_TABLE_22",
    entry_type="u8",
    gamma=2.2,
    size=256,
)

# 2. Inspect it
print(table.summary())

print("\nSample entries:")
for i in (0, 32, 64, 128, 192, 255):
    print(f"  table[{i:3}] = {table[i]}")

# 3. Emit source code
print("\n" + "=" * 60)
print("C SOURCE")
print("=" * 60)
print(table.to_source("c"))
