"""
fonts.py - Font Size Tiers

Maps a word count onto a discrete font-size tier by linear interpolation
between the smallest and largest counts of the displayed selection.
"""

from utils.config import MIN_TIER, MAX_TIER


def check_tier_range(min_tier, max_tier):
    """Raise ValueError unless min_tier <= max_tier."""
    if min_tier > max_tier:
        raise ValueError(
            f"Minimum font tier {min_tier} exceeds maximum {max_tier}")


def font_tier(count, smallest, largest, min_tier=MIN_TIER, max_tier=MAX_TIER):
    """
    Return the font tier for count, given the selection's count range.

    Runtime Complexity: O(1)

    When every selected word has the same count there is no range to
    interpolate over, and every word gets max_tier.
    """
    check_tier_range(min_tier, max_tier)
    if largest == smallest:
        return max_tier

    tier = (count - smallest) * (max_tier - min_tier) // (largest - smallest) + min_tier
    return max(min_tier, min(max_tier, tier))


def font_class(tier):
    """CSS class name for a tier, defined by the external stylesheet."""
    return f"f{tier}"
