"""In-process event dispatch.

This module routes published events to subscribers and commands to
their single handler through a middleware-wrapped mediator.
"""
