"""AURA Teacher Panel package.

A sync client for the classroom attendance device, organized like the rest of
our feature modules: a device gateway (repository-like), a service holding the
panel state, and a thin Flask controller layer on top.
"""
