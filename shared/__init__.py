"""
Shared Kernel

Value objects, domain errors, pricing and the unit of work shared by the
CoworkHub domain apps.
"""
