"""
Probers module - Prober port implementations.
"""

from endpoint_monitor.adapters.probers.http import AdapterHttpProber

__all__ = ["AdapterHttpProber"]
