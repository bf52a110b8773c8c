"""
Literal unit data, one module per category.

Each linear-category module defines a closed ``Enum`` of units, ``BASE_UNIT``
(the unit whose factor is 1), ``ALIASES`` as ``(alias, unit)`` pairs,
``SYMBOLS`` (unit -> canonical symbol) and ``FACTORS`` (unit -> decimal
string, parsed at extended precision). The temperature module has no
factors; its scales are affine and handled by ``engine.temperature``.

The modules are plain data and are validated when ``unitwise.categories``
builds the category objects.
"""
