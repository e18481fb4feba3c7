"""ichor: multi-domain ERP backend.

Business entities are grouped by area (core, config, assets, geography, hr,
procurement, inventory, sales), each exposed over a uniform CRUD HTTP API.
"""

__version__ = "0.1.0"
