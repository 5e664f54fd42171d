"""
Gamma Correction Example
========================

Builds a decoding (gamma correction) table: ``x^(1/gamma)`` brightens
mid-tones. Output is capped at 1000 to match a 10-bit DAC that must not
be driven to full scale.
"""

import gammalut

print("=" * 60)
print("GAMMA CORRECTION EXAMPLE")
print("=" * 60)

# Same parameters written as an assignment string, e.g. from a build file
spec = "name: GAMMA_CORRECTED, entry_type: u16, gamma: 2.4, size: 1024, max_value: 1000, decoding: true"
corrected = gammalut.GammaTable.from_string(spec)
encoded = gammalut.GammaTable("GAMMA_ENCODED", "u16", gamma=2.4, size=1024, max_value=1000)

print("\nMid-tone comparison (input 512 of 1023):")
print(f"  linear:   {round(512 * 1000 / 1023)}")
print(f"  encoding: {encoded[512]}  (darker)")
print(f"  decoding: {corrected[512]}  (brighter)")

print("\nRust source (first lines):")
print("\n".join(corrected.to_source("rust").splitlines()[:4]))

# Invalid parameters fail before anything is computed
try:
    gammalut.GammaTable("BROKEN", "u8", gamma=2.4, size=1024)
except gammalut.ConfigError as e:
    print(f"\nRejected configuration: {e}")
