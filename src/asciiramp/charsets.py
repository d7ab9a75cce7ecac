# Luminance ramps, ordered from sparsest (darkest) to densest (lightest).
# Each ramp is paired with the multiplier used to scale a 0-255 lightness
# into an index.

# 10 levels
RAMP_10 = " .:-=+*#%@"
RAMP_10_SCALE = 9

# 70-level ramp, first 67 glyphs of the classic 68-glyph string ('"' appears twice)
RAMP_70 = " .\"`^\",:;Il!i~+_-?][}{1)(|\\/tfjrxnuvczXYUJCLQ0OZmwqpdbkhao*#MW&8%B@"
RAMP_70_SCALE = 67

# Depths at or below this select RAMP_10, anything above selects RAMP_70
DEPTH_THRESHOLD = 10
