"""
Kernel: models, identity and catalog services, domain errors.
"""
