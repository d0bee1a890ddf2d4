"""Terminal rendering module.

Views turn parsed weather data and provider errors into console output,
separate from the HTTP and config logic.
"""
