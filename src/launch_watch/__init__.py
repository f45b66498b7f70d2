"""
launch_watch — reports which rocket flew the latest SpaceX launch.

Fetches the latest launch and the rocket behind it from the public SpaceX
REST API. Every step is chained through AsyncTry, so a failed request
short-circuits the rest of the chain and surfaces as a single HttpError.
"""

__version__ = "0.1.0"
