"""
This __init__.py file is kept in the root tests directory only.

It lets pytest treat tests/ as a package and keeps import behavior consistent across
environments. Test subdirectories work as namespace packages (PEP 420) without their own
__init__.py files, so test module names under tests/ must stay unique.
"""
