"""
Money Kernel

Exact monetary amounts as signed 64-bit counts of minor units, with:
- A static ISO 4217 currency registry
- Currency conversion through directional exchange rates
- Canonical text, JSON and persistence round trips
- Locale-aware display strings
"""

__version__ = "0.1.0"
