"""
Gilded Rose Inventory Engine

Core modules:
- models: the Item dataclass
- categories: item kinds and the name lookup
- rules: bounded quality helpers and the per-kind rule table
- engine: tick/update step and the GildedRose shop
- changes: per-item change log recorded during a tick (optional)
- catalog: the classic starting inventory
- trace: helpers for producing per-day item traces (no behavior changes)
"""
