"""
Stubbable - Configurable test doubles for interface contracts

Build objects that satisfy a Protocol where every member's behavior is
chosen per use-site: explicitly, through a named preset, or left at a
default that fails loudly when invoked.

Ground Rules:
- Unconfigured calls fail loudly (never a silent default)
- Presets are applied whole or not at all
- Contract-semantic failures travel in the normal return channel
- A constructed stub cannot have its methods reconfigured
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
