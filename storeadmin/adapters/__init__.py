"""Adapter package for external I/O implementations.

Purpose:
    Collect concrete implementations for domain ports (store REST API,
    filesystem settings, and the in-memory stand-in) used by use cases.

Dependencies:
    Individual submodules depend on ``requests``, filesystem APIs, and domain
    protocol definitions.

Call context:
    Imported by ``storeadmin.app.controller`` for runtime wiring and by tests
    for transport-level behavior verification.
"""
