"""JSON web API for the simulator.

This package provides a Flask application that runs simulations over
HTTP.  It is an **optional** extra — install with::

    pip install fifo-vm[web]

The ``create_app`` factory in ``app.py`` serves two endpoints:

- ``POST /api/simulate`` — run a simulation and return JSON.
- ``GET /api/status`` — service name and version.
"""
